"""型宣言から生成クラスのモデルとソースを組み立てる."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbobjgen.codegen.emitter import render
from dbobjgen.codegen.nodes import Constructor, GeneratedClassModel, VersionGroupField
from dbobjgen.column_spec import ColumnSpecification, build_column_spec, is_valid_spec
from dbobjgen.naming import generated_class_name, version_columns_name
from dbobjgen.partition import cumulative_columns, partition_by_version

if TYPE_CHECKING:
    from dbobjgen.config import GenerationContext
    from dbobjgen.model import TypeDeclaration

logger = logging.getLogger(__name__)


def collect_column_specs(
    declaration: TypeDeclaration,
    context: GenerationContext,
) -> list[ColumnSpecification]:
    """有効なカラム仕様だけを宣言順に集める.

    カラム定数名またはアクセサ名が先のフィールドと重なるフィールドは、
    警告を出して読み飛ばす。
    """
    require_accessors = context.config.generate_accessors
    specs: list[ColumnSpecification] = []
    owners: dict[str, str] = {}
    for field_decl in declaration.fields:
        spec = build_column_spec(field_decl, context)
        if spec is None or not is_valid_spec(spec, require_accessors=require_accessors):
            continue
        names = [spec.constant_name]
        if spec.accessor_names is not None:
            names += [spec.accessor_names.getter, spec.accessor_names.setter]
        clash = next((name for name in names if name in owners), None)
        if clash is not None:
            context.warn(
                "field [%s] duplicates %s of field [%s]. ignored!",
                field_decl.identifier,
                clash,
                owners[clash],
            )
            continue
        owners.update(dict.fromkeys(names, field_decl.identifier))
        specs.append(spec)
    return specs


def _resolve_latest_version(declaration: TypeDeclaration, context: GenerationContext) -> int:
    latest = declaration.latest_version
    if isinstance(latest, int) and not isinstance(latest, bool) and latest >= 1:
        return latest
    default = context.config.default_version
    context.warn(
        "invalid latest version for [%s]: %r, use default %d",
        declaration.qualified_name,
        latest,
        default,
    )
    return default


def build_version_groups(
    groups: dict[int, list[ColumnSpecification]],
) -> tuple[VersionGroupField, ...]:
    """バージョンごとのカラム集合定数を昇順に作る."""
    return tuple(
        VersionGroupField(
            name=version_columns_name(version),
            version=version,
            members=tuple(spec.constant_name for spec in columns),
        )
        for version, columns in cumulative_columns(groups)
    )


def build_class_model(
    declaration: TypeDeclaration,
    context: GenerationContext,
) -> GeneratedClassModel | None:
    """型宣言から生成クラスのモデルを組み立てる.

    Args:
        declaration: 生成対象の型
        context: 設定と診断の出力先

    Returns:
        生成クラスのモデル。有効なカラムが 1 つもない場合は None

    """
    config = context.config
    class_name = generated_class_name(declaration.name, config.class_suffix)
    context.note("gen class: %s.%s", declaration.package, class_name)

    specs = collect_column_specs(declaration, context)
    if not specs:
        context.warn("[%s] has no valid columns. skipped!", declaration.qualified_name)
        return None

    latest_version = _resolve_latest_version(declaration, context)
    groups = partition_by_version(specs)
    version_groups = build_version_groups(groups)
    if latest_version not in groups:
        context.warn(
            "latest version %d of [%s] has no columns (versions: %s)",
            latest_version,
            declaration.qualified_name,
            ", ".join(str(v) for v in groups),
        )

    accessors = []
    for spec in specs:
        if spec.getter is not None and spec.setter is not None:
            accessors.extend((spec.getter, spec.setter))

    constructors = (
        Constructor("__init__", ("context", "version")),
        Constructor("latest", ("context",), delegate_version=latest_version),
    )

    logger.debug("built %s: %d columns, versions %s", class_name, len(specs), list(groups))
    return GeneratedClassModel(
        target_type_name=declaration.name,
        package_name=declaration.package,
        class_name=class_name,
        superclass=config.base_class,
        runtime_module=config.runtime_module,
        latest_version=latest_version,
        fields=tuple(spec.field for spec in specs if spec.field is not None),
        accessors=tuple(accessors),
        version_groups=version_groups,
        constructors=constructors,
    )


def synthesize(model: GeneratedClassModel) -> str:
    """生成クラスのモデルから Python ソースを出力する."""
    return render(model)
