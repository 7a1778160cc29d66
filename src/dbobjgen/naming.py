"""フィールド名からカラム名・アクセサ名を導出する命名規則."""

from __future__ import annotations

import re
from typing import Literal

GETTER_PREFIX = "get"
SETTER_PREFIX = "set"
COLUMN_CONSTANT_PREFIX = "COLUMN_"
VERSION_COLUMNS_PREFIX = "COLUMNS_VER"
DEFAULT_CLASS_SUFFIX = "DBObject"

_MEMBER_PREFIXES = ("m", "s")
_RESIDUAL_PREFIXES = ("m_", "s_")

AccessorKind = Literal["getter", "setter"]


def _strip_member_prefix(field_id: str) -> str:
    """先頭の ``m`` / ``s`` 1 文字を取り除く (``mUserName`` → ``UserName``)."""
    if len(field_id) > 1 and field_id[0] in _MEMBER_PREFIXES:
        return field_id[1:]
    return field_id


def column_name_from_field(field_id: str) -> str:
    """フィールド名からカラム名を導出する.

    大文字の前に ``_`` を挿入して小文字化し、残った ``m_`` / ``s_`` を取り除く。

    Examples:
        >>> column_name_from_field("mUserName")
        'user_name'
        >>> column_name_from_field("mScore")
        'score'

    """
    if not field_id:
        return field_id
    name = re.sub(r"([A-Z])", r"_\1", field_id).lower()
    if name.startswith(_RESIDUAL_PREFIXES):
        name = name[2:]
    return name


def accessor_name(field_id: str, kind: AccessorKind) -> str:
    """Getter / setter のメソッド名を返す (``mUserName`` → ``getUserName``)."""
    if not field_id:
        return field_id
    base = _strip_member_prefix(field_id)
    prefix = GETTER_PREFIX if kind == "getter" else SETTER_PREFIX
    return prefix + base[0].upper() + base[1:]


def parameter_name(field_id: str) -> str:
    """Setter の引数名を返す (``mUserName`` → ``userName``)."""
    if not field_id:
        return field_id
    base = _strip_member_prefix(field_id)
    return base[0].lower() + base[1:]


def constant_name(column_name: str) -> str:
    """カラム定数名を返す (``user_name`` → ``COLUMN_USER_NAME``)."""
    return COLUMN_CONSTANT_PREFIX + re.sub(r"\W", "_", column_name).upper()


def version_columns_name(version: int) -> str:
    """バージョンごとのカラム集合の定数名."""
    return f"{VERSION_COLUMNS_PREFIX}{version}"


def generated_class_name(type_name: str, suffix: str = DEFAULT_CLASS_SUFFIX) -> str:
    """生成クラス名 (``User`` → ``UserDBObject``)."""
    return type_name + suffix


def module_name_for(class_name: str) -> str:
    """生成クラスを置くモジュール名 (``UserDBObject`` → ``user_db_object``)."""
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", "_", class_name).lower()
