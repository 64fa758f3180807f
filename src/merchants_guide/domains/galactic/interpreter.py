# src/merchants_guide/domains/galactic/interpreter.py
import logging
import math
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ...config import AppConfig
from ...errors import UnboundSymbolError, UnknownProductError
from .parser import StatementParser
from .roman import RomanLetter, resolve
from .statements import (
    PriceDefinition,
    PriceQuery,
    SymbolDefinition,
    UnrecognizedQuery,
    ValueQuery,
)

log = logging.getLogger(__name__)


def format_credits(amount: float) -> str:
    """Prints whole amounts without a fractional part and never uses exponents."""
    if math.isinf(amount):
        # products past the float range overflow instead of failing
        return "inf"
    if amount.is_integer():
        return str(int(amount))
    return format(Decimal(repr(amount)), 'f')


class InterpreterState:
    """
    Holds the symbol and price tables built up from definition lines and
    answers query lines against them.

    Both tables keep the first definition they see; later definitions of the
    same symbol or product are ignored.
    """

    def __init__(self, parser: StatementParser = None):
        self.parser = parser or StatementParser()
        self.symbols: Dict[str, RomanLetter] = {}
        self.prices: Dict[str, float] = {}

    def process_line(self, line: str) -> Optional[str]:
        statement = self.parser.classify(line)

        if isinstance(statement, SymbolDefinition):
            self._define_symbol(statement)
        elif isinstance(statement, PriceDefinition):
            self._define_price(statement)
        elif isinstance(statement, ValueQuery):
            return self._answer_value(statement)
        elif isinstance(statement, PriceQuery):
            return self._answer_price(statement)
        elif isinstance(statement, UnrecognizedQuery):
            log.debug("No answer for %r", statement.line)
            return AppConfig.UNKNOWN_QUERY_ANSWER
        return None

    # --- Definitions ---
    def _define_symbol(self, statement: SymbolDefinition):
        if statement.symbol in self.symbols:
            log.debug("Ignoring redefinition of symbol %r", statement.symbol)
            return
        self.symbols[statement.symbol] = statement.letter
        log.debug("Bound symbol %r to %s", statement.symbol, statement.letter.name)

    def _define_price(self, statement: PriceDefinition):
        if statement.product in self.prices:
            log.debug("Ignoring redefinition of product %r", statement.product)
            return
        unit_price = statement.credits / self.to_decimal(statement.symbols)
        self.prices[statement.product] = unit_price
        log.debug("Priced %r at %r credits per unit", statement.product, unit_price)

    # --- Queries ---
    def _answer_value(self, statement: ValueQuery) -> str:
        decimal_value = self.to_decimal(statement.symbols)
        return f"{' '.join(statement.symbols)} is {decimal_value}"

    def _answer_price(self, statement: PriceQuery) -> str:
        unit_price = self.prices.get(statement.product)
        if unit_price is None:
            raise UnknownProductError(statement.product)
        multiplier = self.to_decimal(statement.symbols)
        total = format_credits(multiplier * unit_price)
        return f"{' '.join(statement.symbols)} {statement.product} is {total} Credits"

    # --- Symbol Helpers ---
    def to_letters(self, symbols: Iterable[str]) -> List[RomanLetter]:
        letters = []
        for symbol in symbols:
            letter = self.symbols.get(symbol)
            if letter is None:
                raise UnboundSymbolError(symbol)
            letters.append(letter)
        return letters

    def to_decimal(self, symbols: Iterable[str]) -> int:
        return resolve(self.to_letters(symbols))
