"""生成ソースの書き込み先のテスト."""

from __future__ import annotations

from pathlib import Path

import pytest

from dbobjgen.exceptions import SourceWriteError
from dbobjgen.writer import FileWriter, MemoryWriter, SourceWriter


class TestFileWriter:
    """FileWriter の検証."""

    def test_path_for(self, tmp_path: Path) -> None:
        writer = FileWriter(tmp_path)
        assert writer.path_for("example.models", "user_db_object") == (
            tmp_path / "example" / "models" / "user_db_object.py"
        )

    def test_path_for_without_package(self, tmp_path: Path) -> None:
        assert FileWriter(tmp_path).path_for("", "user_db_object") == tmp_path / "user_db_object.py"

    def test_write_creates_directories(self, tmp_path: Path) -> None:
        writer = FileWriter(tmp_path / "out")
        path = writer.write("example.models", "user_db_object", "x = 1\n")
        assert path.read_text(encoding="utf-8") == "x = 1\n"

    def test_write_failure(self, tmp_path: Path) -> None:
        """書き込めない場合は SourceWriteError."""
        blocker = tmp_path / "example"
        blocker.write_text("not a directory", encoding="utf-8")
        writer = FileWriter(tmp_path)
        with pytest.raises(SourceWriteError):
            writer.write("example.models", "user_db_object", "x = 1\n")

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(FileWriter(tmp_path), SourceWriter)


class TestMemoryWriter:
    """MemoryWriter の検証."""

    def test_write(self) -> None:
        writer = MemoryWriter()
        writer.write("example.models", "user_db_object", "x = 1\n")
        writer.write("", "top", "y = 2\n")
        assert writer.sources == {"example.models.user_db_object": "x = 1\n", "top": "y = 2\n"}

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryWriter(), SourceWriter)
