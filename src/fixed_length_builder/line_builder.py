"""
Line Builder - Assembles one fixed-length line per record.

This module handles:
- Rendering every field of the schema in declared order
- Dispatching each value to the string or number formatter
- Enforcing that all lines of one file have the same length
"""

from typing import Any, List, Mapping, Optional

from fixed_length_builder.exceptions import FormatError, LineLengthMismatchError
from fixed_length_builder.formatting import format_number, pad_string
from fixed_length_builder.logging_config import get_logger
from fixed_length_builder.models import FieldRule, RawSchema, compile_schema
from fixed_length_builder.renderer import FieldRenderer

logger = get_logger("line_builder")


class LineBuilder:
    """
    Builds fixed-length lines from records.

    The first line built sets the baseline total length; every following
    line must match it. The baseline can also be seeded up front.

    Usage:
        builder = LineBuilder(schema)
        line = builder.build_line({"NAME": "ACME", "AMOUNT": 12.5})
    """

    def __init__(
        self,
        schema: RawSchema,
        renderer: Optional[FieldRenderer] = None,
        total_length: Optional[int] = None,
    ):
        """
        Initialize the line builder.

        Args:
            schema: Compiled Schema or raw schema definition
            renderer: Field renderer (a default one is created if omitted)
            total_length: Optional pre-seeded baseline line length
        """
        self.schema = compile_schema(schema)
        self.renderer = renderer or FieldRenderer()
        self.total_length = total_length
        self.lines: List[str] = []

    def reset(self, total_length: Optional[int] = None) -> None:
        """Clear built lines and the baseline length."""
        self.lines = []
        self.total_length = total_length

    def render_field(self, rule: FieldRule, record: Mapping[str, Any]) -> str:
        """Render one field to exactly rule.width characters."""
        raw = self.renderer.render(rule, record)

        if rule.is_numeric:
            try:
                return format_number(
                    raw,
                    rule.width,
                    decimals=rule.number.decimals,
                    numeric_width=rule.number.numeric_width,
                )
            except FormatError as e:
                e.attach_key(rule.key)
                raise

        return pad_string("" if raw is None else str(raw), rule.width)

    def build_line(self, record: Mapping[str, Any]) -> str:
        """
        Build one line and check it against the baseline length.

        Args:
            record: Field key to value mapping

        Returns:
            The fixed-length line (also appended to self.lines)

        Raises:
            BuilderError: Any field or length error
        """
        parts = []
        total = 0
        for rule in self.schema:
            parts.append(self.render_field(rule, record))
            total += rule.width

        line = "".join(parts)
        self.check_length(total)
        self.lines.append(line)
        logger.debug("Built line %d (%d chars)", len(self.lines), len(line))
        return line

    def check_length(self, length: int) -> None:
        """
        Check a line length against the baseline.

        The first call sets the baseline when none is seeded.

        Raises:
            LineLengthMismatchError: If length differs from the baseline
        """
        if self.total_length is None:
            self.total_length = length
        elif length != self.total_length:
            raise LineLengthMismatchError(
                expected=self.total_length,
                actual=length,
                line_number=len(self.lines) + 1,
            )
