"""DBObjectGenerator: 高レベル API."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType

from dbobjgen.config import GenerationContext, GeneratorConfig
from dbobjgen.diagnostics import DiagnosticReporter, LoggingReporter
from dbobjgen.exceptions import IntrospectionError
from dbobjgen.introspect import describe_type, discover
from dbobjgen.model import TypeDeclaration
from dbobjgen.naming import generated_class_name, module_name_for
from dbobjgen.synthesizer import build_class_model, synthesize
from dbobjgen.writer import SourceWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """1 つの型の生成結果.

    ``source`` が None の場合は有効なカラムがなく、何も生成していない。
    ``error`` には書き込み失敗の内容が入る。
    """

    type_name: str
    class_name: str
    module_name: str
    source: str | None = None
    path: Path | None = None
    error: str | None = None

    @property
    def generated(self) -> bool:
        return self.source is not None


class DBObjectGenerator:
    """注釈付きクラスから DatabaseObject サブクラスを生成する.

    Examples:
        >>> generator = DBObjectGenerator(writer=FileWriter("build/generated"))
        >>> results = generator.generate([User, Order])
        >>> results[0].class_name
        'UserDBObject'

        モジュール内の ``@db_object`` クラスをまとめて生成:

        >>> generator.generate_module(models)

    """

    def __init__(
        self,
        *,
        config: GeneratorConfig | None = None,
        reporter: DiagnosticReporter | None = None,
        writer: SourceWriter | None = None,
    ) -> None:
        """初期化.

        Args:
            config: 生成設定（省略時は既定値）
            reporter: 診断の出力先（省略時は logging）
            writer: 生成ソースの書き込み先（None の場合は書き込まない）

        """
        self.context = GenerationContext(
            config=config or GeneratorConfig(),
            reporter=reporter or LoggingReporter(),
        )
        self._writer = writer

    @property
    def config(self) -> GeneratorConfig:
        return self.context.config

    def declare(self, item: type | TypeDeclaration) -> TypeDeclaration:
        """クラスを型宣言に変換する（型宣言はそのまま返す）."""
        if isinstance(item, TypeDeclaration):
            return item
        return describe_type(item, default_version=self.config.default_version)

    def generate_type(self, item: type | TypeDeclaration) -> GenerationResult:
        """1 つの型について生成し、writer があれば書き込む.

        型宣言の読み取り・書き込みの失敗は error 診断として報告し、例外は送出しない。
        書き込み先が送出した例外は種類を問わず報告する。
        """
        try:
            declaration = self.declare(item)
        except IntrospectionError as e:
            self.context.error("cannot read %s: %s", item, e)
            name = getattr(item, "__name__", repr(item))
            return GenerationResult(name, "", "", error=str(e))
        context = self.context
        class_name = generated_class_name(declaration.name, self.config.class_suffix)
        module_name = module_name_for(class_name)

        context.note("dbobject: package = %s", declaration.package)
        context.note("dbobject: class = %s", declaration.name)
        context.note("dbobject: fields = %s", [f.identifier for f in declaration.fields])

        model = build_class_model(declaration, context)
        if model is None:
            return GenerationResult(declaration.name, class_name, module_name)

        source = synthesize(model)
        if self._writer is None:
            return GenerationResult(declaration.name, class_name, module_name, source)

        try:
            path = self._writer.write(declaration.package, module_name, source)
        except Exception as e:
            context.error("generate class for %s failed: %s", declaration.qualified_name, e)
            return GenerationResult(
                declaration.name, class_name, module_name, source, error=str(e)
            )
        logger.info("generated %s.%s", declaration.package, class_name)
        return GenerationResult(declaration.name, class_name, module_name, source, path)

    def generate(self, items: Iterable[type | TypeDeclaration]) -> list[GenerationResult]:
        """与えられた順に各型を生成する."""
        return [self.generate_type(item) for item in items]

    def generate_module(self, module: ModuleType) -> list[GenerationResult]:
        """モジュール内の ``@db_object`` クラスを定義順に生成する."""
        return self.generate(discover(module))


def generate_source(
    item: type | TypeDeclaration,
    *,
    config: GeneratorConfig | None = None,
    reporter: DiagnosticReporter | None = None,
) -> str | None:
    """1 つの型の生成ソースを返す（有効なカラムがなければ None）."""
    generator = DBObjectGenerator(config=config, reporter=reporter)
    return generator.generate_type(item).source
