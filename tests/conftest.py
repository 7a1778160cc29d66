"""pytest 共通設定: 生成テスト基盤."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from dbobjgen.annotations import DBColumn
from dbobjgen.config import GenerationContext, GeneratorConfig
from dbobjgen.diagnostics import RecordingReporter
from dbobjgen.model import FieldDeclaration, TypeDeclaration


@pytest.fixture
def recorder() -> RecordingReporter:
    """診断を保持するレポーター."""
    return RecordingReporter()


@pytest.fixture
def context(recorder: RecordingReporter) -> GenerationContext:
    """アクセサ生成ありのコンテキスト."""
    return GenerationContext(config=GeneratorConfig(), reporter=recorder)


@pytest.fixture
def user_declaration() -> TypeDeclaration:
    """User 型（latest_version=2）の宣言."""
    return TypeDeclaration(
        package="example.models",
        name="User",
        latest_version=2,
        fields=(
            FieldDeclaration("mUserId", "long", DBColumn(primary="true")),
            FieldDeclaration("mUserName", "String", DBColumn("user_name", allow_null="false")),
            FieldDeclaration("mAge", "int", DBColumn("age")),
            FieldDeclaration("mMarried", "boolean", DBColumn("married")),
            FieldDeclaration("mScore", "double", DBColumn("score", version=2)),
        ),
    )


def _load(source: str, class_name: str) -> Any:
    namespace: dict[str, Any] = {}
    exec(compile(source, "<generated>", "exec"), namespace)  # noqa: S102
    return namespace[class_name]


@pytest.fixture
def load_generated() -> Callable[[str, str], Any]:
    """生成ソースを実行してクラスを取り出す関数."""
    return _load
