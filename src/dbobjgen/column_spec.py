"""フィールド宣言からカラム仕様を組み立てる."""

from __future__ import annotations

import keyword
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dbobjgen.annotations import DEFAULT_VERSION
from dbobjgen.codegen.nodes import AccessorMethod, ColumnField
from dbobjgen.naming import accessor_name, column_name_from_field, constant_name, parameter_name
from dbobjgen.type_mapper import StorageKind, TypeMapping, map_type

if TYPE_CHECKING:
    from dbobjgen.config import GenerationContext
    from dbobjgen.model import FieldDeclaration


@dataclass(frozen=True)
class AccessorNames:
    """Getter / setter 名と setter の引数名."""

    getter: str
    setter: str
    parameter: str


@dataclass(frozen=True)
class ColumnSpecification:
    """1 フィールド分のカラム定義とアクセサ."""

    column_name: str
    storage_kind: StorageKind
    allow_null: bool
    primary: bool
    version: int
    constant_name: str
    field: ColumnField | None
    accessor_names: AccessorNames | None = None
    getter: AccessorMethod | None = None
    setter: AccessorMethod | None = None


def parse_flag(
    raw: Any,
    *,
    default: bool,
    flag: str,
    field_id: str,
    context: GenerationContext,
) -> bool:
    """文字列の真偽値を解釈する.

    ``"true"`` / ``"false"``（大文字小文字を区別しない）と bool 以外は
    警告を出して ``default`` を返す。
    """
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    context.warn("parse %s for [%s] failed: %r, use default %s", flag, field_id, raw, default)
    return default


def _resolve_version(raw: Any, field_id: str, context: GenerationContext) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 1:
        return raw
    context.warn("invalid version for [%s]: %r, use default %d", field_id, raw, DEFAULT_VERSION)
    return DEFAULT_VERSION


def _safe_parameter(name: str) -> str:
    if keyword.iskeyword(name) or name == "self":
        return name + "_"
    return name


def _build_accessors(
    field_id: str,
    const: str,
    mapping: TypeMapping,
) -> tuple[AccessorNames, AccessorMethod, AccessorMethod] | None:
    if not mapping.supported or mapping.accessor_type is None or mapping.retrieval_op is None:
        return None
    names = AccessorNames(
        getter=accessor_name(field_id, "getter"),
        setter=accessor_name(field_id, "setter"),
        parameter=_safe_parameter(parameter_name(field_id)),
    )
    getter = AccessorMethod(
        name=names.getter,
        kind="getter",
        constant_name=const,
        value_type=mapping.accessor_type,
        retrieval_op=mapping.retrieval_op,
        boolean=mapping.boolean,
    )
    setter = AccessorMethod(
        name=names.setter,
        kind="setter",
        constant_name=const,
        value_type=mapping.accessor_type,
        retrieval_op=mapping.retrieval_op,
        parameter=names.parameter,
        boolean=mapping.boolean,
    )
    return names, getter, setter


def build_column_spec(
    declaration: FieldDeclaration,
    context: GenerationContext,
) -> ColumnSpecification | None:
    """フィールド宣言からカラム仕様を組み立てる.

    Args:
        declaration: カラム宣言付きフィールド
        context: 設定と診断の出力先

    Returns:
        カラム仕様。識別子・型が空の場合や未対応の型の場合は None

    """
    field_id = declaration.identifier
    type_name = declaration.type_name
    annotation = declaration.annotation

    if not field_id or not type_name:
        context.warn("field [%s] of type [%s] has no name or type. ignored!", field_id, type_name)
        return None

    context.note("dbfield: name = %s", field_id)
    context.note("dbfield: type = %s", type_name)
    context.note("dbfield: version = %s", annotation.version)

    column_name = annotation.name or column_name_from_field(field_id)

    allow_null = parse_flag(
        annotation.allow_null, default=True, flag="allow_null", field_id=field_id, context=context
    )
    primary = parse_flag(
        annotation.primary, default=False, flag="primary", field_id=field_id, context=context
    )
    if primary:
        allow_null = False

    version = _resolve_version(annotation.version, field_id, context)

    mapping = map_type(type_name)
    if not mapping.supported:
        context.warn("[%s] of field [%s] is unsupported data type. ignored!", type_name, field_id)
        return None

    const = constant_name(column_name)
    column_field = ColumnField(
        constant_name=const,
        column_class=mapping.storage_kind.column_class,
        column_name=column_name,
        allow_null=allow_null,
        primary=primary,
        version=version,
    )

    names = getter = setter = None
    if context.config.generate_accessors:
        accessors = _build_accessors(field_id, const, mapping)
        if accessors is None:
            return None
        names, getter, setter = accessors

    return ColumnSpecification(
        column_name=column_name,
        storage_kind=mapping.storage_kind,
        allow_null=allow_null,
        primary=primary,
        version=version,
        constant_name=const,
        field=column_field,
        accessor_names=names,
        getter=getter,
        setter=setter,
    )


def is_valid_spec(spec: ColumnSpecification | None, *, require_accessors: bool = True) -> bool:
    """カラム定数と（必要なら）getter / setter が揃っているか."""
    if spec is None or spec.field is None:
        return False
    if not require_accessors:
        return True
    return spec.getter is not None and spec.setter is not None
