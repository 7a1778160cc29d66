"""生成ソースの書き込み先."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from dbobjgen.exceptions import SourceWriteError


@runtime_checkable
class SourceWriter(Protocol):
    """生成ソースの書き込みインターフェース."""

    def write(self, package: str, module_name: str, source: str) -> Path | None:
        """パッケージ配下のモジュールとしてソースを書き込む."""
        ...


class FileWriter:
    """``<output_dir>/<package>/<module>.py`` に書き込む."""

    def __init__(self, output_dir: str | Path = ".") -> None:
        self.output_dir = Path(output_dir)

    def path_for(self, package: str, module_name: str) -> Path:
        parts = [p for p in package.split(".") if p]
        return self.output_dir.joinpath(*parts, f"{module_name}.py")

    def write(self, package: str, module_name: str, source: str) -> Path:
        """ソースを UTF-8 で書き込む.

        Raises:
            SourceWriteError: ディレクトリ作成・書き込みに失敗した場合

        """
        path = self.path_for(package, module_name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        except OSError as e:
            msg = f"Cannot write {path}: {e}"
            raise SourceWriteError(msg) from e
        return path


class MemoryWriter:
    """書き込んだソースを ``{"package.module": source}`` で保持する."""

    def __init__(self) -> None:
        self.sources: dict[str, str] = {}

    def write(self, package: str, module_name: str, source: str) -> None:
        key = f"{package}.{module_name}" if package else module_name
        self.sources[key] = source
