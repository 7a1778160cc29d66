"""公開 API のテスト."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import dbobjgen
from dbobjgen import DBColumn, RecordingReporter, db_object


class TestPublicImports:
    """dbobjgen パッケージからの公開インポート."""

    def test_all_names_importable(self) -> None:
        for name in dbobjgen.__all__:
            assert getattr(dbobjgen, name) is not None

    def test_core_operations(self) -> None:
        for name in (
            "build_column_spec",
            "partition_by_version",
            "build_class_model",
            "synthesize",
            "generate_source",
        ):
            assert callable(getattr(dbobjgen, name))


class TestEndToEnd:
    """注釈付き dataclass から生成クラスを使うまで."""

    def test_generate_and_use(self) -> None:
        @db_object(latest_version=2)
        @dataclass
        class Book:
            mIsbn: Annotated[str, DBColumn(primary="true")] = ""
            mTitle: Annotated[str, DBColumn(allow_null="false")] = ""
            mPages: Annotated[int, DBColumn(version=2)] = 0

        reporter = RecordingReporter()
        source = dbobjgen.generate_source(Book, reporter=reporter)
        assert source is not None
        assert reporter.warnings == []

        namespace: dict[str, object] = {}
        exec(compile(source, "<generated>", "exec"), namespace)  # noqa: S102
        book_cls = namespace["BookDBObject"]

        book = book_cls.latest(None)  # type: ignore[attr-defined]
        book.setIsbn("978-4")
        book.setTitle("Python")
        book.setPages(320)
        assert book.to_dict() == {"isbn": "978-4", "title": "Python", "pages": 320}

        old = book_cls(None, 1)  # type: ignore[operator]
        assert [c.name for c in old.get_template().columns] == ["isbn", "title"]
