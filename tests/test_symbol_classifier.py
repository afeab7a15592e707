"""Tests for symbol classification and operator parsing."""

import pytest

from symbol_classifier import Operator, SymbolCategory, classify_symbol, parse_operator


@pytest.mark.parametrize("symbol", list("0123456789"))
def test_digits(symbol):
    assert classify_symbol(symbol) is SymbolCategory.DIGIT


@pytest.mark.parametrize("symbol", ["+", "-", "*", "/", "="])
def test_operators(symbol):
    assert classify_symbol(symbol) is SymbolCategory.OPERATOR


@pytest.mark.parametrize("symbol", ["c", "."])
def test_specials(symbol):
    assert classify_symbol(symbol) is SymbolCategory.SPECIAL


@pytest.mark.parametrize("symbol", ["x", "%", "C", ",", " ", "", "12", "c.", None, 5])
def test_anything_else_is_unrecognized(symbol):
    assert classify_symbol(symbol) is SymbolCategory.UNRECOGNIZED


def test_parse_operator_maps_every_symbol():
    assert [parse_operator(s) for s in "+-*/="] == [
        Operator.ADD,
        Operator.SUBTRACT,
        Operator.MULTIPLY,
        Operator.DIVIDE,
        Operator.EQUALS,
    ]
    assert Operator.DIVIDE.symbol == "/"


def test_parse_operator_rejects_digits():
    with pytest.raises(ValueError):
        parse_operator("7")
