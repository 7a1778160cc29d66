"""カラム仕様のバージョン別グループ化."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dbobjgen.column_spec import ColumnSpecification


def partition_by_version(
    specs: Iterable[ColumnSpecification],
) -> dict[int, list[ColumnSpecification]]:
    """カラム仕様をバージョンごとにまとめる.

    同じバージョン内では出現順を保つ。キーは昇順に並ぶ。
    仕様が 1 つもないバージョンはキーに含まれない。

    Examples:
        >>> groups = partition_by_version(specs)  # versions: 2, 1, 2, 1
        >>> list(groups)
        [1, 2]

    """
    groups: dict[int, list[ColumnSpecification]] = {}
    for spec in specs:
        groups.setdefault(spec.version, []).append(spec)
    return {version: groups[version] for version in sorted(groups)}


def cumulative_columns(
    groups: dict[int, list[ColumnSpecification]],
) -> Iterator[tuple[int, list[ColumnSpecification]]]:
    """各バージョンで有効なカラム（そのバージョン以下で追加されたもの）を昇順に返す."""
    active: list[ColumnSpecification] = []
    for version in sorted(groups):
        active.extend(groups[version])
        yield version, list(active)
