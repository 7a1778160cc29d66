"""宣言型からストレージ種別・アクセサ型への対応表."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StorageKind(Enum):
    """カラムのストレージ種別."""

    INTEGER = "IntegerColumn"
    LONG = "LongColumn"
    TEXT = "TextColumn"
    DOUBLE = "DoubleColumn"
    UNSUPPORTED = ""

    @property
    def column_class(self) -> str:
        """生成コードで使うカラムクラス名."""
        return self.value


@dataclass(frozen=True)
class TypeMapping:
    """宣言型の解決結果."""

    storage_kind: StorageKind
    accessor_type: str | None = None
    retrieval_op: str | None = None
    boolean: bool = False

    @property
    def supported(self) -> bool:
        return self.storage_kind is not StorageKind.UNSUPPORTED


UNSUPPORTED = TypeMapping(StorageKind.UNSUPPORTED)

_INTEGER = TypeMapping(StorageKind.INTEGER, "int", "get_integer_value")
_BOOLEAN = TypeMapping(StorageKind.INTEGER, "bool", "get_integer_value", boolean=True)
_LONG = TypeMapping(StorageKind.LONG, "int", "get_long_value")
_DOUBLE = TypeMapping(StorageKind.DOUBLE, "float", "get_double_value")
_TEXT = TypeMapping(StorageKind.TEXT, "str", "get_text_value")

TYPE_TABLE: dict[str, TypeMapping] = {
    "int": _INTEGER,
    "bool": _BOOLEAN,
    "boolean": _BOOLEAN,
    "long": _LONG,
    "float": _DOUBLE,
    "double": _DOUBLE,
    "str": _TEXT,
    "string": _TEXT,
    "java.lang.string": _TEXT,
}


def map_type(type_name: str | None) -> TypeMapping:
    """宣言型名（大文字小文字を区別しない）を解決する.

    Args:
        type_name: ``int`` や ``str`` などの型名

    Returns:
        対応表にない型は ``UNSUPPORTED``

    """
    if not type_name:
        return UNSUPPORTED
    return TYPE_TABLE.get(type_name.strip().lower(), UNSUPPORTED)
