"""
Pytest configuration and fixtures for fixed-length builder tests.
"""

import json
from datetime import datetime

import pytest


@pytest.fixture
def fixed_now():
    """A pinned timestamp for date fields."""
    return datetime(2024, 3, 5, 14, 30, 15)


@pytest.fixture
def fixed_clock(fixed_now):
    """Clock returning the pinned timestamp."""
    return lambda: fixed_now


@pytest.fixture
def simple_schema():
    """Literal + source field, 5 columns in total."""
    return {
        "A": {"value": "X", "width": 1},
        "B": {"type": "source", "width": 4},
    }


@pytest.fixture
def payment_schema():
    """A realistic payment record: 1 + 8 + 4 + 10 + 10 + 6 = 39 columns."""
    return {
        "RECORD-TYPE": {"value": "P", "width": 1},
        "RUN-DATE": {"type": "date", "format": "%Y%m%d", "width": 8},
        "BATCH": {"type": "string", "format": "B%03d", "args": [7], "width": 4},
        "NAME": {"type": "source", "width": 10},
        "AMOUNT": {"type": "source", "width": 10, "number": {"decimals": 2, "width": 9}},
        "COUNT": {"type": "int", "width": 6},
    }


@pytest.fixture
def payment_records():
    """Records matching payment_schema."""
    return [
        {"NAME": "ACME", "AMOUNT": 1234.5, "COUNT": 3},
        {"NAME": "GLOBEX CORPORATION", "AMOUNT": -42.5, "COUNT": 12},
        {"NAME": "INITECH", "AMOUNT": 0, "COUNT": 0},
    ]


@pytest.fixture
def schema_file(tmp_path, payment_schema):
    """Payment schema written as JSON."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(payment_schema))
    return path


@pytest.fixture
def records_file(tmp_path, payment_records):
    """Payment records written as JSON."""
    path = tmp_path / "records.json"
    path.write_text(json.dumps(payment_records))
    return path
