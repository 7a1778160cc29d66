#!/usr/bin/env python3
"""dbobjgen Example.

This example demonstrates the basic usage of dbobjgen:
- Model definition (dataclass + DBColumn annotations)
- Schema versions (latest_version / DBColumn(version=...))
- Generating the DatabaseObject subclass source
- Using the generated class

Usage:
    uv run python examples/generate_example.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated, Any

from dbobjgen import DBColumn, DBObjectGenerator, Long, MemoryWriter, db_object

# =============================================================================
# Model Definition
# =============================================================================


@db_object(latest_version=2)
@dataclass
class User:
    """User model.

    Use Annotated[T, DBColumn(...)] to declare persisted columns.
    Columns added in a later schema version carry version=N.
    """

    mUserId: Annotated[Long, DBColumn(primary="true")] = Long(0)
    mUserName: Annotated[str, DBColumn("user_name", allow_null="false")] = ""
    mAge: Annotated[int, DBColumn("age")] = 0
    mMarried: Annotated[bool, DBColumn("married")] = False
    mScore: Annotated[float, DBColumn("score", version=2)] = 0.0


# =============================================================================
# Demos
# =============================================================================


def demo_generate(writer: MemoryWriter) -> str:
    """Generate UserDBObject and print its source."""
    print("--- Generated source ---")
    generator = DBObjectGenerator(writer=writer)
    result = generator.generate_type(User)
    assert result.source is not None
    print(result.source)
    return result.source


def demo_use(source: str) -> None:
    """Load the generated class and use both schema versions."""
    print("--- Using UserDBObject ---")
    namespace: dict[str, Any] = {}
    exec(compile(source, "<generated>", "exec"), namespace)  # noqa: S102
    user_cls = namespace["UserDBObject"]

    latest = user_cls.latest(context=None)
    latest.setUserId(1)
    latest.setUserName("alice")
    latest.setMarried(True)
    latest.setScore(92.5)
    print(f"version {latest.version}: {latest.to_dict()}")

    v1 = user_cls(None, 1)
    print(f"version {v1.version}: {[c.name for c in v1.get_template().columns]}")
    print()


def main() -> None:
    """Run the examples."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("dbobjgen Example")
    print("=" * 60)
    print()

    writer = MemoryWriter()
    source = demo_generate(writer)
    demo_use(source)

    print("=" * 60)
    print("Example completed")
    print("=" * 60)


if __name__ == "__main__":
    main()
