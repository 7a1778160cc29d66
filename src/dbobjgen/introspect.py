"""クラスから型宣言を読み取る（dataclass / Pydantic / 注釈付きクラス）."""

from __future__ import annotations

import inspect
import types
from dataclasses import fields, is_dataclass
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from dbobjgen.annotations import DBColumn, DBObject
from dbobjgen.exceptions import IntrospectionError
from dbobjgen.model import FieldDeclaration, TypeDeclaration


def is_db_object(obj: Any) -> bool:
    """``@db_object`` でデコレートされたクラスか."""
    return inspect.isclass(obj) and isinstance(vars(obj).get("__db_object__"), DBObject)


def type_name_of(tp: Any) -> str:
    """型注釈から型名を取り出す.

    ``Annotated`` と ``X | None`` は内側の型を見る。
    """
    if get_origin(tp) is Annotated:
        return type_name_of(get_args(tp)[0])
    if get_origin(tp) in (Union, types.UnionType):
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return type_name_of(args[0])
    name = getattr(tp, "__name__", None)
    if isinstance(name, str) and get_origin(tp) is None:
        return name
    return str(tp)


def _find_column(metadata: Any) -> DBColumn | None:
    for arg in metadata:
        if isinstance(arg, DBColumn):
            return arg
    return None


def _hinted_fields(cls: type) -> list[tuple[str, Any]]:
    """Dataclass と通常クラスのフィールド名と型注釈を宣言順に返す."""
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, SyntaxError, AttributeError) as e:
        msg = f"Cannot resolve type hints of {cls.__qualname__}: {e}"
        raise IntrospectionError(msg) from e
    if is_dataclass(cls):
        return [(f.name, hints.get(f.name, f.type)) for f in fields(cls)]
    return list(hints.items())


def _field_declarations(cls: type) -> tuple[FieldDeclaration, ...]:
    declarations: list[FieldDeclaration] = []

    # Pydantic BaseModel は Annotated のメタデータを model_fields に保持する
    model_fields = getattr(cls, "model_fields", None)
    if isinstance(model_fields, dict) and hasattr(cls, "model_validate"):
        for name, info in model_fields.items():
            column = _find_column(getattr(info, "metadata", ()))
            if column is not None:
                declarations.append(FieldDeclaration(name, type_name_of(info.annotation), column))
        return tuple(declarations)

    for name, hint in _hinted_fields(cls):
        if get_origin(hint) is not Annotated:
            continue
        column = _find_column(get_args(hint)[1:])
        if column is not None:
            declarations.append(FieldDeclaration(name, type_name_of(hint), column))
    return tuple(declarations)


def describe_type(cls: type, *, default_version: int = 1) -> TypeDeclaration:
    """クラスから型宣言を作る.

    Args:
        cls: ``DBColumn`` 注釈付きフィールドを持つクラス
        default_version: ``@db_object`` がない場合の最新バージョン

    Returns:
        型宣言

    Raises:
        IntrospectionError: クラスでない場合、型注釈を解決できない場合

    """
    if not inspect.isclass(cls):
        msg = f"{cls!r} is not a class"
        raise IntrospectionError(msg)

    meta = vars(cls).get("__db_object__")
    latest_version = meta.latest_version if isinstance(meta, DBObject) else default_version

    return TypeDeclaration(
        package=cls.__module__,
        name=cls.__name__,
        latest_version=latest_version,
        fields=_field_declarations(cls),
    )


def discover(module: types.ModuleType) -> list[type]:
    """モジュール内で定義された ``@db_object`` クラスを定義順に返す."""
    return [
        obj
        for obj in vars(module).values()
        if is_db_object(obj) and obj.__module__ == module.__name__
    ]
