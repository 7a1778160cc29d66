"""生成入力となる型宣言・フィールド宣言."""

from __future__ import annotations

from dataclasses import dataclass, field

from dbobjgen.annotations import DEFAULT_VERSION, DBColumn


@dataclass(frozen=True)
class FieldDeclaration:
    """カラム宣言付きフィールド."""

    identifier: str
    type_name: str
    annotation: DBColumn = field(default_factory=DBColumn)


@dataclass(frozen=True)
class TypeDeclaration:
    """生成対象の型."""

    package: str
    name: str
    latest_version: int = DEFAULT_VERSION
    fields: tuple[FieldDeclaration, ...] = ()

    @property
    def qualified_name(self) -> str:
        if not self.package:
            return self.name
        return f"{self.package}.{self.name}"
