"""DBColumn アノテーションと @db_object デコレータ."""

from __future__ import annotations

from typing import Any, NewType

DEFAULT_VERSION = 1

Long = NewType("Long", int)
"""long カラムとして保存する整数フィールドの型."""


class DBColumn:
    """フィールドをカラムとして宣言するアノテーション.

    ``Annotated[str, DBColumn(name="user_name", allow_null="false")]`` のように使う。
    ``allow_null`` と ``primary`` は文字列の真偽値（``"true"`` / ``"false"``）を受け取る。
    """

    def __init__(
        self,
        name: str = "",
        *,
        allow_null: str | bool = "true",
        primary: str | bool = "false",
        version: int = DEFAULT_VERSION,
    ) -> None:
        self.name = name
        self.allow_null = allow_null
        self.primary = primary
        self.version = version

    def __repr__(self) -> str:
        return (
            f"DBColumn({self.name!r}, allow_null={self.allow_null!r}, "
            f"primary={self.primary!r}, version={self.version!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DBColumn):
            return NotImplemented
        return (self.name, self.allow_null, self.primary, self.version) == (
            other.name,
            other.allow_null,
            other.primary,
            other.version,
        )

    def __hash__(self) -> int:
        return hash((self.name, str(self.allow_null), str(self.primary), self.version))


class DBObject:
    """型レベルのメタデータ."""

    def __init__(self, latest_version: int = DEFAULT_VERSION) -> None:
        self.latest_version = latest_version

    def __repr__(self) -> str:
        return f"DBObject(latest_version={self.latest_version!r})"


def db_object(
    cls: type | None = None,
    *,
    latest_version: int = DEFAULT_VERSION,
) -> Any:
    """DB オブジェクト生成対象を示すデコレータ.

    Args:
        cls: デコレート対象クラス
        latest_version: バージョン指定なしで生成したときに使うスキーマバージョン

    """

    def decorator(cls: type) -> type:
        cls.__db_object__ = DBObject(latest_version)  # type: ignore[attr-defined]
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator
