"""生成クラスの基底となるカラム定義と DatabaseObject."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from dbobjgen.exceptions import ColumnValueError, UnknownVersionError
from dbobjgen.type_mapper import StorageKind

__all__ = [
    "Column",
    "DatabaseObject",
    "DoubleColumn",
    "IntegerColumn",
    "LongColumn",
    "Template",
    "TextColumn",
    "UnknownVersionError",
]


class Column:
    """永続化されるカラムの定義."""

    storage_kind: ClassVar[StorageKind] = StorageKind.UNSUPPORTED
    python_type: ClassVar[type] = object

    def __init__(
        self,
        name: str,
        *,
        allow_null: bool = True,
        primary: bool = False,
        version: int = 1,
    ) -> None:
        self.name = name
        self.allow_null = allow_null
        self.primary = primary
        self.version = version

    def convert(self, value: Any) -> Any:
        """保存用の値に変換する."""
        if value is None:
            return None
        try:
            return self.python_type(value)
        except (TypeError, ValueError) as e:
            msg = f"Invalid value for column {self.name!r}: {value!r}"
            raise ColumnValueError(msg) from e

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.name!r}, allow_null={self.allow_null!r}, "
            f"primary={self.primary!r}, version={self.version!r})"
        )


class IntegerColumn(Column):
    storage_kind = StorageKind.INTEGER
    python_type = int


class LongColumn(Column):
    storage_kind = StorageKind.LONG
    python_type = int


class TextColumn(Column):
    storage_kind = StorageKind.TEXT
    python_type = str


class DoubleColumn(Column):
    storage_kind = StorageKind.DOUBLE
    python_type = float


class Template:
    """オブジェクトに登録されたカラムの集合."""

    def __init__(self) -> None:
        self._columns: dict[str, Column] = {}

    def add_columns(self, columns: Iterable[Column]) -> None:
        for column in columns:
            self._columns[column.name] = column

    @property
    def columns(self) -> list[Column]:
        return list(self._columns.values())

    def get_column(self, name: str) -> Column | None:
        return self._columns.get(name)

    def __contains__(self, column: object) -> bool:
        return isinstance(column, Column) and self._columns.get(column.name) is column

    def __len__(self) -> int:
        return len(self._columns)


class DatabaseObject:
    """バージョン付きのカラム集合と値を持つ永続化オブジェクト.

    生成クラスはコンストラクタで自身のバージョンに対応するカラムを
    ``get_template().add_columns(...)`` で登録する。
    """

    def __init__(self, context: Any, version: int = 1) -> None:
        self.context = context
        self.version = version
        self._template = Template()
        self._values: dict[str, Any] = {}

    def get_template(self) -> Template:
        return self._template

    def set_value(self, column: Column, value: Any) -> None:
        """カラムに値を設定する.

        Raises:
            ColumnValueError: 未登録のカラム、または NULL 不可のカラムに None を設定した場合

        """
        if column not in self._template:
            msg = f"Column {column.name!r} is not defined in version {self.version}"
            raise ColumnValueError(msg)
        if value is None and not column.allow_null:
            msg = f"Column {column.name!r} does not allow null"
            raise ColumnValueError(msg)
        self._values[column.name] = column.convert(value)

    def get_value(self, column: Column) -> Any:
        return self._values.get(column.name)

    def get_integer_value(self, column: Column) -> int | None:
        return self.get_value(column)

    def get_long_value(self, column: Column) -> int | None:
        return self.get_value(column)

    def get_text_value(self, column: Column) -> str | None:
        return self.get_value(column)

    def get_double_value(self, column: Column) -> float | None:
        return self.get_value(column)

    def to_dict(self) -> dict[str, Any]:
        """登録カラム順にカラム名→値の辞書を返す."""
        return {column.name: self._values.get(column.name) for column in self._template.columns}
