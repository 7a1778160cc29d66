"""生成設定と、パイプラインに引き回すコンテキスト."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dbobjgen.annotations import DEFAULT_VERSION
from dbobjgen.diagnostics import Diagnostic, DiagnosticReporter, LoggingReporter, Severity
from dbobjgen.naming import DEFAULT_CLASS_SUFFIX

DEFAULT_RUNTIME_MODULE = "dbobjgen.dataobject"
DEFAULT_BASE_CLASS = "DatabaseObject"


@dataclass(frozen=True)
class GeneratorConfig:
    """コード生成の設定.

    Attributes:
        class_suffix: 生成クラス名に付ける接尾辞
        runtime_module: 生成コードがインポートする基底クラスのモジュール
        base_class: 生成クラスの基底クラス名
        generate_accessors: getter / setter を生成するか
        default_version: ``@db_object`` がない場合の最新バージョン

    """

    class_suffix: str = DEFAULT_CLASS_SUFFIX
    runtime_module: str = DEFAULT_RUNTIME_MODULE
    base_class: str = DEFAULT_BASE_CLASS
    generate_accessors: bool = True
    default_version: int = DEFAULT_VERSION


@dataclass
class GenerationContext:
    """1 回の生成処理で共有する設定とレポーター."""

    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    reporter: DiagnosticReporter = field(default_factory=LoggingReporter)

    def note(self, fmt: str, *args: Any) -> None:
        self.reporter.report(Diagnostic(Severity.NOTE, fmt, args))

    def warn(self, fmt: str, *args: Any) -> None:
        self.reporter.report(Diagnostic(Severity.WARNING, fmt, args))

    def error(self, fmt: str, *args: Any) -> None:
        self.reporter.report(Diagnostic(Severity.ERROR, fmt, args))
