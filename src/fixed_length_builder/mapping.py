"""
Record normalisation.

The builder only reads records as mappings. Plain objects are turned into
an owned dict of their fields before a line is built, so the same schema
works for dicts, dataclasses and ordinary objects.
"""

import dataclasses
from typing import Any, Dict, Mapping


def _public_name(name: str) -> str:
    """Strip visibility prefixes: "_Point__x" -> "x", "_y" -> "y"."""
    if name.startswith("_") and "__" in name[1:]:
        name = name.split("__", 1)[1]
    return name.lstrip("_")


def to_mapping(obj: Any) -> Dict[str, Any]:
    """
    Convert a record to a plain dict of field name to value.

    - Mappings are copied as is.
    - Dataclass instances give their fields (not recursed).
    - Other objects give their instance attributes, with private and
      name-mangled prefixes stripped. A public attribute wins over a
      private one that strips to the same name.

    Args:
        obj: Mapping, dataclass instance or object with __dict__

    Returns:
        New dict owned by the caller

    Raises:
        TypeError: If obj cannot be converted
    """
    if isinstance(obj, Mapping):
        return dict(obj)

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}

    try:
        attributes = vars(obj)
    except TypeError:
        raise TypeError(f"Cannot convert {type(obj).__name__} to a record mapping") from None

    result: Dict[str, Any] = {}
    for name, value in attributes.items():
        public = _public_name(name)
        if public in result and name != public:
            continue
        result[public] = value
    return result
