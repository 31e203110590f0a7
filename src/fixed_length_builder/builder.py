"""
Fixed-Length File Builder - Turns a record source into a fixed-width file.

This module orchestrates the build:
- checks that a source and a schema are configured
- compiles the schema once
- builds one line per record, in source order, failing on the first error
- keeps the lines for retrieval, joined with a glue string or as a list
"""

import time
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional

from fixed_length_builder.exceptions import BuilderError, MissingSchemaError, MissingSourceError
from fixed_length_builder.line_builder import LineBuilder
from fixed_length_builder.logging_config import get_logger
from fixed_length_builder.mapping import to_mapping
from fixed_length_builder.models import RawSchema, compile_schema
from fixed_length_builder.renderer import Clock, FieldRenderer

# Called with each line of a successful build and its zero-based index
OnLineCallback = Callable[[str, int], None]

logger = get_logger("builder")


class FixedLengthFileBuilder:
    """
    Builds a fixed-length file from records and a schema.

    Usage:
        builder = FixedLengthFileBuilder(records, schema)
        builder.build()
        text = builder.get_content()
    """

    def __init__(
        self,
        source: Optional[Iterable[Any]] = None,
        schema: Optional[RawSchema] = None,
        glue: str = "\n",
        total_length: Optional[int] = None,
        clock: Optional[Clock] = None,
        callback: Optional[OnLineCallback] = None,
    ):
        """
        Initialize the builder.

        Args:
            source: Iterable of records (mappings or objects)
            schema: Raw or compiled schema
            glue: Separator used by get_content()
            total_length: Optional pre-seeded line length
            clock: "now" provider for date fields (datetime.now if omitted)
            callback: Optional hook called for every line once the build succeeds
        """
        self.source = source
        self.schema = schema
        self.glue = glue
        self._seed_length = total_length
        self._total_length = total_length
        self.clock: Clock = clock or datetime.now
        self.callback = callback
        self._content: List[str] = []

    # Explicit accessors

    def get_source(self) -> Optional[Iterable[Any]]:
        return self.source

    def set_source(self, source: Iterable[Any]) -> None:
        self.source = source

    def get_schema(self) -> Optional[RawSchema]:
        return self.schema

    def set_schema(self, schema: RawSchema) -> None:
        self.schema = schema

    def get_glue(self) -> str:
        return self.glue

    def set_glue(self, glue: str) -> None:
        self.glue = glue

    @property
    def total_length(self) -> Optional[int]:
        """Baseline line length: seeded value, or the one set by the last build."""
        return self._total_length

    @total_length.setter
    def total_length(self, total_length: Optional[int]) -> None:
        self._seed_length = total_length
        self._total_length = total_length

    def get_total_length(self) -> Optional[int]:
        return self.total_length

    def set_total_length(self, total_length: Optional[int]) -> None:
        """Seed the baseline length checked against every line."""
        self.total_length = total_length

    def get_callback(self) -> Optional[OnLineCallback]:
        return self.callback

    def set_callback(self, callback: Optional[OnLineCallback]) -> None:
        self.callback = callback

    def build(self) -> List[str]:
        """
        Build all lines from the source.

        Content is replaced only when every record succeeds, so a failed
        build leaves the previous content untouched.

        Returns:
            The built lines

        Raises:
            MissingSourceError: No source configured
            MissingSchemaError: No schema configured
            BuilderError: Any field, format or length error
        """
        if self.source is None:
            raise MissingSourceError()
        if not self.schema:
            raise MissingSchemaError()

        start_time = time.time()
        schema = compile_schema(self.schema)

        # One timestamp per build, every line shows the same date
        now = self.clock()
        line_builder = LineBuilder(
            schema,
            renderer=FieldRenderer(clock=lambda: now),
            total_length=self._seed_length,
        )
        logger.info("Building fixed-length file with %d fields", len(schema))

        for index, record in enumerate(self.source):
            try:
                line_builder.build_line(to_mapping(record))
            except BuilderError:
                # Reported by the caller, record number kept for debugging
                logger.debug("Build stopped at record %d", index + 1)
                raise

        self._content = line_builder.lines
        self._total_length = line_builder.total_length

        # Callbacks only ever see lines of a complete build
        if self.callback is not None:
            for index, line in enumerate(self._content):
                self.callback(line, index)

        elapsed = time.time() - start_time
        logger.info(
            "Built %d lines of %s chars in %.3f seconds",
            len(self._content),
            self.total_length,
            elapsed,
        )
        return list(self._content)

    def get_content(self) -> str:
        """Return all lines joined with the glue string."""
        return self.glue.join(self._content)

    def get_uncombined_content(self) -> List[str]:
        """Return a copy of the built lines."""
        return list(self._content)

    def set_content(self, content: Iterable[str]) -> None:
        self._content = list(content)

    def save(self, path: Path, encoding: str = "latin-1") -> Path:
        """
        Write the joined content to a file.

        Args:
            path: Output file path
            encoding: Output encoding

        Returns:
            The path written
        """
        path = Path(path)
        # newline="" keeps the glue exactly as configured
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(self.get_content())
        logger.info("Wrote %d lines to %s", len(self._content), path)
        return path


def build_fixed_length_file(
    records: Iterable[Any],
    schema: RawSchema,
    glue: str = "\n",
    clock: Optional[Clock] = None,
) -> str:
    """
    Build a fixed-length file in one call.

    Args:
        records: Iterable of records (mappings or objects)
        schema: Raw or compiled schema
        glue: Line separator
        clock: Optional "now" provider for date fields

    Returns:
        The file content
    """
    builder = FixedLengthFileBuilder(records, schema, glue=glue, clock=clock)
    builder.build()
    return builder.get_content()
