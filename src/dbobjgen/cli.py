"""dbobjgen コマンドラインインターフェース."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Annotated

import typer

from dbobjgen.config import DEFAULT_RUNTIME_MODULE, GeneratorConfig
from dbobjgen.diagnostics import LoggingReporter, RecordingReporter
from dbobjgen.generator import DBObjectGenerator
from dbobjgen.naming import DEFAULT_CLASS_SUFFIX
from dbobjgen.writer import FileWriter

app = typer.Typer(
    name="dbobjgen",
    help="Generate versioned DatabaseObject classes from annotated models.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """dbobjgen: annotated model → DatabaseObject code generator."""


@app.command()
def generate(
    modules: Annotated[list[str], typer.Argument(help="Modules containing @db_object classes")],
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Directory to write generated modules")
    ] = Path("generated"),
    accessors: Annotated[
        bool, typer.Option("--accessors/--no-accessors", help="Generate getter/setter methods")
    ] = True,
    runtime_module: Annotated[
        str, typer.Option("--runtime-module", help="Module providing DatabaseObject")
    ] = DEFAULT_RUNTIME_MODULE,
    suffix: Annotated[
        str, typer.Option("--suffix", help="Suffix appended to generated class names")
    ] = DEFAULT_CLASS_SUFFIX,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show notes")] = False,
) -> None:
    """Generate DatabaseObject classes for every @db_object class in MODULES."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GeneratorConfig(
        class_suffix=suffix,
        runtime_module=runtime_module,
        generate_accessors=accessors,
    )
    reporter = RecordingReporter(forward=LoggingReporter())
    generator = DBObjectGenerator(config=config, reporter=reporter, writer=FileWriter(output))

    generated = 0
    for name in modules:
        try:
            module = importlib.import_module(name)
        except ImportError as e:
            typer.echo(f"error: cannot import {name}: {e}", err=True)
            raise typer.Exit(code=2) from e
        for result in generator.generate_module(module):
            if result.path is not None:
                generated += 1
                typer.echo(f"{result.class_name} -> {result.path}")

    typer.echo(
        f"{generated} class(es) generated, "
        f"{len(reporter.warnings)} warning(s), {len(reporter.errors)} error(s)"
    )
    if reporter.has_errors:
        raise typer.Exit(code=1)
