# tests/test_statement_parser.py
import pytest

from merchants_guide.domains.galactic.parser import StatementParser, parse_credits
from merchants_guide.domains.galactic.roman import RomanLetter
from merchants_guide.domains.galactic.statements import (
    PriceDefinition,
    PriceQuery,
    SymbolDefinition,
    UnrecognizedQuery,
    ValueQuery,
)
from merchants_guide.errors import InvalidNumberError, InvalidNumeralError, UnparseableLineError


@pytest.fixture(scope="module")
def parser() -> StatementParser:
    return StatementParser()


def test_symbol_definition(parser: StatementParser) -> None:
    assert parser.classify("glob is I") == SymbolDefinition("glob", RomanLetter.I)


def test_symbol_definition_tolerates_extra_whitespace(parser: StatementParser) -> None:
    assert parser.classify("  prok \t is   V  ") == SymbolDefinition("prok", RomanLetter.V)


def test_symbol_definition_bad_letter_is_an_error(parser: StatementParser) -> None:
    with pytest.raises(InvalidNumeralError) as excinfo:
        parser.classify("glob is Q")
    assert excinfo.value.token == "Q"


def test_symbol_definition_letters_are_case_sensitive(parser: StatementParser) -> None:
    with pytest.raises(InvalidNumeralError):
        parser.classify("glob is i")


def test_keywords_can_be_symbols(parser: StatementParser) -> None:
    assert parser.classify("is is X") == SymbolDefinition("is", RomanLetter.X)
    assert parser.classify("how is M") == SymbolDefinition("how", RomanLetter.M)


def test_keywords_only_match_whole_tokens(parser: StatementParser) -> None:
    with pytest.raises(UnparseableLineError):
        parser.classify("glob island")


def test_price_definition(parser: StatementParser) -> None:
    assert parser.classify("glob glob Silver is 34 Credits") == PriceDefinition(("glob", "glob"), "Silver", 34.0)


def test_price_definition_decimal_credits(parser: StatementParser) -> None:
    statement = parser.classify("pish Iron is 12.5 Credits")
    assert statement == PriceDefinition(("pish",), "Iron", 12.5)


@pytest.mark.parametrize("credits", ["lots", "-5", "nan", "inf", "3,5", "1_000", "١٢"])
def test_price_definition_bad_number(parser: StatementParser, credits: str) -> None:
    with pytest.raises(InvalidNumberError) as excinfo:
        parser.classify(f"glob Silver is {credits} Credits")
    assert excinfo.value.token == credits


def test_price_definition_needs_a_symbol(parser: StatementParser) -> None:
    with pytest.raises(UnparseableLineError):
        parser.classify("Silver is 34 Credits")


def test_value_query(parser: StatementParser) -> None:
    assert parser.classify("how much is pish tegj glob glob ?") == ValueQuery(("pish", "tegj", "glob", "glob"))


def test_price_query(parser: StatementParser) -> None:
    assert parser.classify("how many Credits is glob prok Silver ?") == PriceQuery(("glob", "prok"), "Silver")


def test_price_query_without_symbols_is_unparseable(parser: StatementParser) -> None:
    with pytest.raises(UnparseableLineError):
        parser.classify("how many Credits is Silver ?")


@pytest.mark.parametrize(
    "line",
    [
        "how much wood could a woodchuck chuck if a woodchuck could chuck wood ?",
        "how much ?",
        "how much is ?",
    ],
)
def test_unrecognized_query(parser: StatementParser, line: str) -> None:
    assert parser.classify(line) == UnrecognizedQuery(line)


def test_value_query_wins_over_catch_all(parser: StatementParser) -> None:
    assert isinstance(parser.classify("how much is glob ?"), ValueQuery)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "glob",
        "glob is",
        "glob is I V",
        "how many glob ?",
        "how much is glob",
        "how much is glob?",
        "glob Silver is 34 credits",
        "HOW MUCH IS glob ?",
    ],
)
def test_unparseable_lines(parser: StatementParser, line: str) -> None:
    with pytest.raises(UnparseableLineError) as excinfo:
        parser.classify(line)
    assert excinfo.value.line == line
    assert str(excinfo.value) == f"'{line}' could not be parsed"


@pytest.mark.parametrize("token, expected", [("0", 0.0), ("34", 34.0), ("3910", 3910.0), ("1e3", 1000.0)])
def test_parse_credits(token: str, expected: float) -> None:
    assert parse_credits(token) == expected


@pytest.mark.parametrize("line", ["glob\xa0is I", "glob is I", "glob　is\xa0I"])
def test_unicode_whitespace_separates_tokens(parser: StatementParser, line: str) -> None:
    assert parser.classify(line) == SymbolDefinition("glob", RomanLetter.I)


def test_value_query_with_unicode_whitespace(parser: StatementParser) -> None:
    assert parser.classify("how\xa0much is glob\xa0?") == ValueQuery(("glob",))
