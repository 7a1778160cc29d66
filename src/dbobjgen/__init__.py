"""dbobjgen: 注釈付きモデルからバージョン付き DatabaseObject を生成する."""

from dbobjgen.annotations import DBColumn, DBObject, Long, db_object
from dbobjgen.column_spec import ColumnSpecification, build_column_spec, is_valid_spec
from dbobjgen.config import GenerationContext, GeneratorConfig
from dbobjgen.diagnostics import (
    Diagnostic,
    DiagnosticReporter,
    LoggingReporter,
    RecordingReporter,
    Severity,
)
from dbobjgen.exceptions import (
    ColumnValueError,
    DbObjGenError,
    IntrospectionError,
    SourceWriteError,
    UnknownVersionError,
)
from dbobjgen.generator import DBObjectGenerator, GenerationResult, generate_source
from dbobjgen.introspect import describe_type, discover
from dbobjgen.model import FieldDeclaration, TypeDeclaration
from dbobjgen.partition import partition_by_version
from dbobjgen.synthesizer import build_class_model, synthesize
from dbobjgen.type_mapper import StorageKind, map_type
from dbobjgen.writer import FileWriter, MemoryWriter, SourceWriter

__all__ = [
    "ColumnSpecification",
    "ColumnValueError",
    "DBColumn",
    "DBObject",
    "DBObjectGenerator",
    "DbObjGenError",
    "Diagnostic",
    "DiagnosticReporter",
    "FieldDeclaration",
    "FileWriter",
    "GenerationContext",
    "GenerationResult",
    "GeneratorConfig",
    "IntrospectionError",
    "LoggingReporter",
    "Long",
    "MemoryWriter",
    "RecordingReporter",
    "Severity",
    "SourceWriteError",
    "SourceWriter",
    "StorageKind",
    "TypeDeclaration",
    "UnknownVersionError",
    "build_class_model",
    "build_column_spec",
    "db_object",
    "describe_type",
    "discover",
    "generate_source",
    "is_valid_spec",
    "map_type",
    "partition_by_version",
    "synthesize",
]
