"""生成クラスを構成する宣言ノード."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class ColumnField:
    """``COLUMN_X = XxxColumn(...)`` のクラス定数."""

    constant_name: str
    column_class: str
    column_name: str
    allow_null: bool
    primary: bool
    version: int


@dataclass(frozen=True)
class AccessorMethod:
    """カラム 1 つ分の getter / setter."""

    name: str
    kind: Literal["getter", "setter"]
    constant_name: str
    value_type: str
    retrieval_op: str
    parameter: str | None = None
    boolean: bool = False


@dataclass(frozen=True)
class VersionGroupField:
    """``COLUMNS_VERn = (...)`` のクラス定数."""

    name: str
    version: int
    members: tuple[str, ...]


@dataclass(frozen=True)
class Constructor:
    """生成クラスのコンストラクタ.

    ``delegate_version`` が None のものは基底クラスを初期化してからカラムを登録する。
    値があるものはそのバージョンを指定してクラス自身を呼び出す。
    """

    name: str
    parameters: tuple[str, ...]
    delegate_version: int | None = None


@dataclass(frozen=True)
class GeneratedClassModel:
    """1 つの生成クラス全体."""

    target_type_name: str
    package_name: str
    class_name: str
    superclass: str
    runtime_module: str
    latest_version: int
    fields: tuple[ColumnField, ...]
    accessors: tuple[AccessorMethod, ...]
    version_groups: tuple[VersionGroupField, ...]
    constructors: tuple[Constructor, ...]

    @property
    def versions(self) -> tuple[int, ...]:
        return tuple(group.version for group in self.version_groups)
