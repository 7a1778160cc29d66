"""生成クラスの宣言ノードと Python ソースへの変換."""

from dbobjgen.codegen.emitter import lower, render
from dbobjgen.codegen.nodes import (
    AccessorMethod,
    ColumnField,
    Constructor,
    GeneratedClassModel,
    VersionGroupField,
)

__all__ = [
    "AccessorMethod",
    "ColumnField",
    "Constructor",
    "GeneratedClassModel",
    "VersionGroupField",
    "lower",
    "render",
]
