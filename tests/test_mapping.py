"""Tests for record normalisation."""

from collections import OrderedDict
from dataclasses import dataclass

import pytest

from fixed_length_builder.mapping import to_mapping


@dataclass
class Invoice:
    number: str
    amount: float


class Customer:
    def __init__(self):
        self.name = "ACME"
        self._code = "C01"
        self.__secret = "hidden"


class Shadowed:
    def __init__(self):
        self._name = "private"
        self.name = "public"


class TestToMapping:
    """Tests for to_mapping."""

    def test_dict_is_copied(self):
        record = {"A": 1}
        result = to_mapping(record)
        assert result == {"A": 1}
        assert result is not record

    def test_other_mapping(self):
        assert to_mapping(OrderedDict([("A", 1), ("B", 2)])) == {"A": 1, "B": 2}

    def test_dataclass(self):
        assert to_mapping(Invoice("INV1", 9.5)) == {"number": "INV1", "amount": 9.5}

    def test_plain_object_strips_prefixes(self):
        assert to_mapping(Customer()) == {"name": "ACME", "code": "C01", "secret": "hidden"}

    def test_public_attribute_wins(self):
        assert to_mapping(Shadowed()) == {"name": "public"}

    def test_result_is_owned(self):
        customer = Customer()
        result = to_mapping(customer)
        result["name"] = "CHANGED"
        assert customer.name == "ACME"

    def test_unconvertible(self):
        with pytest.raises(TypeError):
            to_mapping(42)
