"""dbobjgen 例外クラス."""

from __future__ import annotations


class DbObjGenError(Exception):
    """dbobjgen の基底例外."""


class IntrospectionError(DbObjGenError):
    """クラスから型宣言を読み取れない."""


class SourceWriteError(DbObjGenError):
    """生成ソースの書き込みに失敗."""


class ColumnValueError(DbObjGenError):
    """カラム値の設定エラー."""


class UnknownVersionError(DbObjGenError):
    """要求されたスキーマバージョンに対応するカラム定義が存在しない."""

    def __init__(self, version: int, known_versions: tuple[int, ...] = ()) -> None:
        self.version = version
        self.known_versions = tuple(known_versions)
        known = ", ".join(str(v) for v in self.known_versions) or "none"
        super().__init__(f"No columns defined for version {version} (known versions: {known})")
