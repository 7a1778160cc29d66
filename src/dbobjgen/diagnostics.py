"""生成時の診断メッセージ（note / warning / error）."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger("dbobjgen.diagnostics")


class Severity(Enum):
    """診断の重要度."""

    NOTE = logging.DEBUG
    WARNING = logging.WARNING
    ERROR = logging.ERROR


@dataclass(frozen=True)
class Diagnostic:
    """書式文字列と引数を持つ診断."""

    severity: Severity
    fmt: str
    args: tuple[Any, ...] = ()

    @property
    def message(self) -> str:
        """引数を埋め込んだメッセージ."""
        if not self.args:
            return self.fmt
        return self.fmt % self.args


@runtime_checkable
class DiagnosticReporter(Protocol):
    """診断の受け取り側インターフェース."""

    def report(self, diagnostic: Diagnostic) -> None:
        """診断を 1 件受け取る."""
        ...


class LoggingReporter:
    """診断を logging に流すレポーター."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def report(self, diagnostic: Diagnostic) -> None:
        """診断の重要度に対応するレベルでログ出力する."""
        self._logger.log(diagnostic.severity.value, diagnostic.fmt, *diagnostic.args)


@dataclass
class RecordingReporter:
    """診断を保持するレポーター.

    ``forward`` を指定すると受け取った診断をそのまま転送する。
    """

    forward: DiagnosticReporter | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        if self.forward is not None:
            self.forward.report(diagnostic)

    def of(self, severity: Severity) -> list[Diagnostic]:
        """指定した重要度の診断だけを返す."""
        return [d for d in self.diagnostics if d.severity is severity]

    @property
    def warnings(self) -> list[Diagnostic]:
        return self.of(Severity.WARNING)

    @property
    def errors(self) -> list[Diagnostic]:
        return self.of(Severity.ERROR)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
