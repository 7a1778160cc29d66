"""GeneratedClassModel を Python の AST に変換してソースを出力する."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dbobjgen.codegen.nodes import (
        AccessorMethod,
        ColumnField,
        Constructor,
        GeneratedClassModel,
        VersionGroupField,
    )

UNKNOWN_VERSION_ERROR = "UnknownVersionError"
INIT_MEMBERS = "_init_members"
HEADER = "# Generated by dbobjgen from {source}. Do not edit."


def _name(identifier: str, *, store: bool = False) -> ast.Name:
    return ast.Name(id=identifier, ctx=ast.Store() if store else ast.Load())


def _attr(value: ast.expr, attr: str) -> ast.Attribute:
    return ast.Attribute(value=value, attr=attr, ctx=ast.Load())


def _const(value: object) -> ast.Constant:
    return ast.Constant(value=value, kind=None)


def _call(
    func: ast.expr,
    *args: ast.expr,
    keywords: dict[str, ast.expr] | None = None,
) -> ast.Call:
    return ast.Call(
        func=func,
        args=list(args),
        keywords=[ast.keyword(arg=k, value=v) for k, v in (keywords or {}).items()],
    )


def _self_attr(attr: str) -> ast.Attribute:
    return _attr(_name("self"), attr)


def _assign(target: str, value: ast.expr) -> ast.Assign:
    return ast.Assign(targets=[_name(target, store=True)], value=value, type_comment=None)


def _arguments(*params: tuple[str, str | None]) -> ast.arguments:
    return ast.arguments(
        posonlyargs=[],
        args=[
            ast.arg(arg=name, annotation=_name(ann) if ann else None, type_comment=None)
            for name, ann in params
        ],
        vararg=None,
        kwonlyargs=[],
        kw_defaults=[],
        kwarg=None,
        defaults=[],
    )


def _function(
    name: str,
    args: ast.arguments,
    body: list[ast.stmt],
    *,
    returns: ast.expr | None = None,
    decorators: list[ast.expr] | None = None,
) -> ast.FunctionDef:
    return ast.FunctionDef(
        name=name,
        args=args,
        body=body,
        decorator_list=decorators or [],
        returns=returns,
        type_comment=None,
        type_params=[],
    )


def lower_column_field(column: ColumnField) -> ast.Assign:
    """``COLUMN_X = XxxColumn("x", allow_null=..., primary=..., version=...)``."""
    value = _call(
        _name(column.column_class),
        _const(column.column_name),
        keywords={
            "allow_null": _const(column.allow_null),
            "primary": _const(column.primary),
            "version": _const(column.version),
        },
    )
    return _assign(column.constant_name, value)


def lower_version_group(group: VersionGroupField) -> ast.Assign:
    value = ast.Tuple(elts=[_name(member) for member in group.members], ctx=ast.Load())
    return _assign(group.name, value)


def lower_constructor(constructor: Constructor, class_name: str) -> ast.FunctionDef:
    """明示バージョン版は ``__init__``、既定バージョン版はクラスメソッドになる."""
    if constructor.delegate_version is None:
        params = [("self", None)] + [
            (p, "int" if p == "version" else None) for p in constructor.parameters
        ]
        super_init = _attr(_call(_name("super")), "__init__")
        body: list[ast.stmt] = [
            ast.Expr(value=_call(super_init, *[_name(p) for p in constructor.parameters])),
            ast.Expr(value=_call(_self_attr(INIT_MEMBERS))),
        ]
        return _function(
            constructor.name,
            _arguments(*params),
            body,
            returns=_const(None),
        )

    params = [("cls", None)] + [(p, None) for p in constructor.parameters]
    delegated = _call(
        _name("cls"),
        *[_name(p) for p in constructor.parameters],
        _const(constructor.delegate_version),
    )
    return _function(
        constructor.name,
        _arguments(*params),
        [ast.Return(value=delegated)],
        returns=_const(class_name),
        decorators=[_name("classmethod")],
    )


def lower_init_members(groups: tuple[VersionGroupField, ...]) -> ast.FunctionDef:
    """実行時バージョンで分岐し、対応するカラム集合をテンプレートに登録する."""
    known = ast.Tuple(elts=[_const(g.version) for g in groups], ctx=ast.Load())
    chain: list[ast.stmt] = [
        ast.Raise(
            exc=_call(_name(UNKNOWN_VERSION_ERROR), _self_attr("version"), known),
            cause=None,
        )
    ]
    for group in reversed(groups):
        test = ast.Compare(
            left=_self_attr("version"),
            ops=[ast.Eq()],
            comparators=[_const(group.version)],
        )
        register = _call(_attr(_name("template"), "add_columns"), _self_attr(group.name))
        chain = [ast.If(test=test, body=[ast.Expr(value=register)], orelse=chain)]

    body: list[ast.stmt] = [_assign("template", _call(_self_attr("get_template"))), *chain]
    return _function(INIT_MEMBERS, _arguments(("self", None)), body, returns=_const(None))


def lower_accessor(accessor: AccessorMethod) -> ast.FunctionDef:
    column = _self_attr(accessor.constant_name)
    if accessor.kind == "getter":
        value: ast.expr = _call(_self_attr(accessor.retrieval_op), column)
        if accessor.boolean:
            value = ast.Compare(left=value, ops=[ast.Eq()], comparators=[_const(1)])
        return _function(
            accessor.name,
            _arguments(("self", None)),
            [ast.Return(value=value)],
            returns=_name(accessor.value_type),
        )

    param = accessor.parameter or "value"
    stored: ast.expr = _name(param)
    if accessor.boolean:
        stored = ast.IfExp(test=_name(param), body=_const(1), orelse=_const(0))
    return _function(
        accessor.name,
        _arguments(("self", None), (param, accessor.value_type)),
        [ast.Expr(value=_call(_self_attr("set_value"), column, stored))],
        returns=_const(None),
    )


def _imports(model: GeneratedClassModel) -> ast.ImportFrom:
    names = {model.superclass, UNKNOWN_VERSION_ERROR}
    names.update(field.column_class for field in model.fields)
    return ast.ImportFrom(
        module=model.runtime_module,
        names=[ast.alias(name=name, asname=None) for name in sorted(names)],
        level=0,
    )


def _source_name(model: GeneratedClassModel) -> str:
    if not model.package_name:
        return model.target_type_name
    return f"{model.package_name}.{model.target_type_name}"


def lower(model: GeneratedClassModel) -> ast.Module:
    """生成クラスのモデルをモジュール AST に変換する."""
    doc = f"Database object for {_source_name(model)}."
    body: list[ast.stmt] = [ast.Expr(value=_const(doc))]
    body.extend(lower_column_field(f) for f in model.fields)
    body.extend(lower_version_group(g) for g in model.version_groups)
    body.extend(lower_constructor(c, model.class_name) for c in model.constructors)
    body.append(lower_init_members(model.version_groups))
    body.extend(lower_accessor(a) for a in model.accessors)

    cls = ast.ClassDef(
        name=model.class_name,
        bases=[_name(model.superclass)],
        keywords=[],
        body=body,
        decorator_list=[],
        type_params=[],
    )
    module = ast.Module(body=[_imports(model), cls], type_ignores=[])
    return ast.fix_missing_locations(module)


def render(model: GeneratedClassModel) -> str:
    """生成クラスのソースコードを返す."""
    return f"{HEADER.format(source=_source_name(model))}\n{ast.unparse(lower(model))}\n"
