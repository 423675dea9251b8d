"""Tests for cryptarithm validation."""

import pytest

from app.services.engines.encoding.cryptarithm import CryptarithmEngine


class TestCryptarithmValidation:
    """Test suite for CryptarithmEngine.validate_equation."""

    @pytest.fixture
    def engine(self):
        return CryptarithmEngine()

    @pytest.fixture
    def solution(self):
        return {"S": 9, "E": 5, "N": 6, "D": 7, "M": 1, "O": 0, "R": 8, "Y": 2}

    def test_send_more_money(self, engine, solution):
        result = engine.validate_equation("SEND + MORE = MONEY", solution)

        assert result.valid is True
        assert result.result == 10652
        assert result.numbers == [9567, 1085, 10652]
        assert result.error is None

    def test_string_mapping(self, engine):
        result = engine.validate_equation(
            "send+more=money", "S=9,E=5,N=6,D=7,M=1,O=0,R=8,Y=2"
        )
        assert result.valid is True

    def test_parse_equation(self, engine):
        assert engine.parse_equation("SEND + MORE = MONEY") == (["SEND", "MORE", "MONEY"], "+")
        assert engine.parse_equation("AB × C = DE") == (["AB", "C", "DE"], "×")
        assert engine.parse_equation("SEND MORE") == (["SENDMORE"], None)

    @pytest.mark.parametrize("equation", ["SEND MORE MONEY", "A + B", "A + B + C = D", "A = B = C"])
    def test_invalid_format(self, engine, solution, equation):
        result = engine.validate_equation(equation, solution)
        assert result.valid is False
        assert result.error == "Invalid equation format"

    def test_incomplete_mapping(self, engine, solution):
        del solution["Y"]
        result = engine.validate_equation("SEND + MORE = MONEY", solution)
        assert result.error == "Incomplete letter mapping"

    def test_leading_zero_rejected(self, engine):
        result = engine.validate_equation("AB + C = AD", {"A": 0, "B": 1, "C": 2, "D": 3})
        assert result.valid is False
        assert result.error == "Incomplete letter mapping"

    def test_duplicate_digits(self, engine, solution):
        solution["M"] = 9
        result = engine.validate_equation("SEND + MORE = MONEY", solution)
        assert result.error == "Each letter must map to a unique digit"

    def test_non_digit_values(self, engine, solution):
        solution["S"] = 12
        result = engine.validate_equation("SEND + MORE = MONEY", solution)
        assert result.error == "Each letter must map to a digit 0-9"

    def test_does_not_balance(self, engine, solution):
        solution["Y"] = 3
        result = engine.validate_equation("SEND + MORE = MONEY", solution)
        assert result.valid is False
        assert result.error == "Equation doesn't balance: 9567 + 1085 = 10652, but expected 10653"

    @pytest.mark.parametrize(
        "equation,mapping,expected",
        [
            ("AB - C = D", {"A": 1, "B": 2, "C": 3, "D": 9}, 9),
            ("AB * C = DE", {"A": 1, "B": 4, "C": 5, "D": 7, "E": 0}, 70),
            ("AB / C = D", {"A": 1, "B": 2, "C": 3, "D": 4}, 4),
            ("AB ÷ C = D", {"A": 1, "B": 2, "C": 3, "D": 4}, 4),
        ],
    )
    def test_operators(self, engine, equation, mapping, expected):
        result = engine.validate_equation(equation, mapping)
        assert result.valid is True
        assert result.result == expected

    def test_division_by_zero(self, engine):
        result = engine.validate_equation("AB / C = D", {"A": 1, "B": 2, "C": 0, "D": 4})
        assert result.error == "Division by zero"

    def test_inexact_division(self, engine):
        result = engine.validate_equation("AB / C = D", {"A": 1, "B": 3, "C": 2, "D": 6})
        assert result.valid is False
        assert result.error == "Equation doesn't balance: 13 / 2 = 6.5, but expected 6"

    def test_overlong_word_rejected(self, engine):
        mapping = {"A": 1, "B": 2, "C": 3}
        result = engine.validate_equation(f"{'A' * 5000} / B = C", mapping)
        assert result.valid is False
        assert result.error == "Invalid equation format"
