"""Fixed-Length File Builder.

Build fixed-width text files from records (dicts or objects) and a
schema describing every field slot.

Basic Usage:
    >>> from fixed_length_builder import FixedLengthFileBuilder
    >>>
    >>> schema = {
    ...     "TYPE": {"value": "X", "width": 1},
    ...     "NAME": {"type": "source", "width": 4},
    ...     "AMOUNT": {"type": "source", "width": 10,
    ...                "number": {"decimals": 2, "width": 9}},
    ... }
    >>> builder = FixedLengthFileBuilder([{"NAME": "YZ", "AMOUNT": -42.5}], schema)
    >>> builder.build()
    ['XYZ   -00042.50']

Command-Line Usage:
    fixed-length-build --schema schema.json --records records.json -o out.txt
"""

__version__ = "1.0.0"

from fixed_length_builder.exceptions import (
    BuilderError,
    ConfigError,
    FormatError,
    InvalidSchemaError,
    LineLengthMismatchError,
    MissingFieldError,
    MissingLengthError,
    MissingSchemaError,
    MissingSourceError,
    NumericOverflowError,
)
from fixed_length_builder.models import (
    FieldRule,
    NumberFormat,
    RuleKind,
    Schema,
    compile_rule,
    compile_schema,
)
from fixed_length_builder.formatting import format_number, pad_string
from fixed_length_builder.renderer import FieldRenderer
from fixed_length_builder.line_builder import LineBuilder
from fixed_length_builder.builder import FixedLengthFileBuilder, build_fixed_length_file
from fixed_length_builder.mapping import to_mapping
from fixed_length_builder.config import Config, create_default_config

__all__ = [
    # Version
    "__version__",
    # Main API
    "FixedLengthFileBuilder",
    "build_fixed_length_file",
    "LineBuilder",
    "FieldRenderer",
    "format_number",
    "pad_string",
    "to_mapping",
    # Schema
    "Schema",
    "FieldRule",
    "NumberFormat",
    "RuleKind",
    "compile_rule",
    "compile_schema",
    # Configuration
    "Config",
    "create_default_config",
    # Exceptions
    "BuilderError",
    "MissingSourceError",
    "MissingSchemaError",
    "MissingLengthError",
    "InvalidSchemaError",
    "FormatError",
    "NumericOverflowError",
    "MissingFieldError",
    "LineLengthMismatchError",
    "ConfigError",
]
