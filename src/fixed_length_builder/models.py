"""
Schema models for the fixed-length file builder.

A schema is an ordered list of field rules. Raw rules are plain dicts,
as they come from code or from a JSON schema file:

    {
        "RECORD-TYPE": {"value": "H", "width": 1},
        "RUN-DATE":    {"type": "date", "format": "%Y%m%d", "width": 8},
        "BATCH":       {"type": "string", "format": "B%03d", "args": [7], "width": 4},
        "NAME":        {"type": "source", "width": 20},
        "AMOUNT":      {"type": "source", "width": 10,
                        "number": {"decimals": 2, "width": 9}},
    }

compile_schema() resolves every raw rule into a FieldRule once, so the
line builder never re-inspects dict keys per record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence, Tuple, Union

from fixed_length_builder.exceptions import InvalidSchemaError, MissingLengthError


class RuleKind(Enum):
    """How the raw value of a field is obtained."""

    LITERAL = "literal"  # fixed value from the rule
    DATE = "date"  # current date/time, strftime format
    STRING = "string"  # printf-style template filled with args
    SOURCE = "source"  # value read from the record
    UNTYPED = "untyped"  # no value and no recognised type: renders ""


# "int" and "float" read from the record and always render as numbers
NUMERIC_TYPES = {"int": 0, "float": 2}


@dataclass(frozen=True)
class NumberFormat:
    """Numeric rendering directive.

    Attributes:
        decimals: Number of fixed decimal places
        numeric_width: Width of the signed block (sign column plus digits).
            None means no sign column is reserved.
    """

    decimals: int = 0
    numeric_width: Optional[int] = None


@dataclass(frozen=True)
class FieldRule:
    """A compiled rule for one output slot."""

    key: str
    kind: RuleKind
    width: int
    value: Optional[str] = None
    format: Optional[str] = None
    args: Tuple[Any, ...] = ()
    number: Optional[NumberFormat] = None

    @property
    def is_numeric(self) -> bool:
        """Return True if the field renders through the number formatter."""
        return self.number is not None


class Schema(Sequence[FieldRule]):
    """Ordered, read-only collection of compiled field rules."""

    def __init__(self, fields: Iterable[FieldRule]):
        self._fields: Tuple[FieldRule, ...] = tuple(fields)

    def __getitem__(self, index):
        return self._fields[index]

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self._fields)

    def __repr__(self) -> str:
        return f"Schema({[f.key for f in self._fields]})"

    @property
    def keys(self) -> list:
        """Field keys in output order."""
        return [f.key for f in self._fields]

    @property
    def total_width(self) -> int:
        """Sum of all declared field widths."""
        return sum(f.width for f in self._fields)


RawSchema = Union[Schema, Mapping[str, Mapping[str, Any]], Sequence[Any]]


def _is_width(value: Any) -> bool:
    # bool is an int subclass but never a width
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _compile_number(key: str, raw: Mapping[str, Any], width: int) -> Optional[NumberFormat]:
    """Build the NumberFormat of a raw rule, or None for string fields."""
    field_type = raw.get("type")
    block = raw.get("number")
    if block is None and field_type not in NUMERIC_TYPES:
        return None

    if block is None:
        block = {}
    elif not isinstance(block, Mapping):
        raise InvalidSchemaError(
            numeric_width=None,
            width=width,
            key=key,
            message=f"number block must be an object, got {block!r}",
        )
    decimals = block.get("decimals", NUMERIC_TYPES.get(field_type, 0))
    if not _is_width(decimals):
        raise InvalidSchemaError(
            numeric_width=block.get("width"),
            width=width,
            key=key,
            message=f"decimals must be a non-negative integer, got {decimals!r}",
        )

    numeric_width = block.get("width", block.get("numeric_width"))
    if numeric_width is not None:
        if not _is_width(numeric_width):
            raise InvalidSchemaError(
                numeric_width=numeric_width,
                width=width,
                key=key,
                message=f"numeric width must be a non-negative integer, got {numeric_width!r}",
            )
        if numeric_width > width:
            raise InvalidSchemaError(numeric_width=numeric_width, width=width, key=key)

    return NumberFormat(decimals=decimals, numeric_width=numeric_width)


def compile_rule(key: str, raw: Mapping[str, Any]) -> FieldRule:
    """Compile one raw rule dict into a FieldRule.

    Resolution order mirrors rendering order: a literal value wins over
    everything else, then date, string and source types. Anything else
    becomes UNTYPED.

    Raises:
        MissingLengthError: width absent or not a non-negative integer
        InvalidSchemaError: numeric width larger than width
    """
    width = raw.get("width", raw.get("length"))
    if not _is_width(width):
        raise MissingLengthError(key, width)

    number = _compile_number(key, raw, width)
    field_type = raw.get("type")

    if "value" in raw:
        value = raw["value"]
        return FieldRule(
            key=key,
            kind=RuleKind.LITERAL,
            width=width,
            value="" if value is None else str(value),
            number=number,
        )
    if field_type == "date":
        return FieldRule(
            key=key, kind=RuleKind.DATE, width=width, format=raw.get("format", ""), number=number
        )
    if field_type == "string":
        return FieldRule(
            key=key,
            kind=RuleKind.STRING,
            width=width,
            format=raw.get("format", ""),
            args=tuple(raw.get("args") or ()),
            number=number,
        )
    if field_type == "source" or field_type in NUMERIC_TYPES:
        return FieldRule(key=key, kind=RuleKind.SOURCE, width=width, number=number)

    return FieldRule(key=key, kind=RuleKind.UNTYPED, width=width, number=number)


def compile_schema(raw_schema: RawSchema) -> Schema:
    """Compile a raw schema into a Schema.

    Accepts a Schema (returned as is), a mapping of key to rule dict,
    a sequence of (key, rule dict) pairs, or a sequence of FieldRules.
    """
    if isinstance(raw_schema, Schema):
        return raw_schema

    if isinstance(raw_schema, Mapping):
        items: Iterable[Any] = raw_schema.items()
    else:
        items = raw_schema

    fields = []
    for item in items:
        if isinstance(item, FieldRule):
            fields.append(item)
            continue
        key, raw = item
        fields.append(compile_rule(str(key), raw))
    return Schema(fields)
