# src/merchants_guide/domains/galactic/parser.py
import math
import re

from lark.exceptions import UnexpectedInput

from ...config import AppConfig
from ...errors import InvalidNumberError, UnparseableLineError
from ...framework.base_interpreter import BaseInterpreter, build_parser, execute_dsl, v_args
from .roman import RomanLetter
from .statements import (
    PriceDefinition,
    PriceQuery,
    Statement,
    SymbolDefinition,
    UnrecognizedQuery,
    ValueQuery,
)

STATEMENT_RULE = "statement"
UNRECOGNIZED_RULE = "unrecognized_query"

# plain ASCII decimal notation, no digit separators
CREDITS_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_credits(token: str) -> float:
    if not CREDITS_PATTERN.fullmatch(token):
        raise InvalidNumberError(token)
    credits = float(token)
    if not math.isfinite(credits) or credits < 0:
        raise InvalidNumberError(token)
    return credits


class StatementBuilder(BaseInterpreter):
    """Turns a parsed statement tree into one of the statement dataclasses."""

    def symbols(self, tokens):
        return tuple(tokens)

    @v_args(inline=True)
    def symbol_definition(self, symbol, letter):
        return SymbolDefinition(symbol, RomanLetter.from_token(letter))

    @v_args(inline=True)
    def price_definition(self, symbols, product, credits):
        return PriceDefinition(symbols, product, parse_credits(credits))

    @v_args(inline=True)
    def value_query(self, symbols):
        return ValueQuery(symbols)

    @v_args(inline=True)
    def price_query(self, symbols, product):
        return PriceQuery(symbols, product)


class StatementParser:
    def __init__(self, grammar_path: str = None):
        self.parser = build_parser(
            grammar_path or AppConfig.get_grammar_path(),
            (STATEMENT_RULE, UNRECOGNIZED_RULE),
        )

    def classify(self, line: str) -> Statement:
        """
        Classifies a single line into a statement.

        The "how much ... ?" catch-all is only tried once the line matched no
        statement rule, so well-formed value queries always win over it.
        A line matching neither raises UnparseableLineError.
        """
        try:
            return execute_dsl(line, self.parser, StatementBuilder(), start=STATEMENT_RULE)
        except UnexpectedInput:
            pass

        try:
            self.parser.parse(line, start=UNRECOGNIZED_RULE)
        except UnexpectedInput:
            raise UnparseableLineError(line) from None
        return UnrecognizedQuery(line)
