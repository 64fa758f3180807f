# src/merchants_guide/domains/galactic/statements.py
from dataclasses import dataclass
from typing import Tuple, Union

from .roman import RomanLetter


@dataclass(frozen=True)
class SymbolDefinition:
    symbol: str
    letter: RomanLetter


@dataclass(frozen=True)
class PriceDefinition:
    symbols: Tuple[str, ...]
    product: str
    credits: float


@dataclass(frozen=True)
class ValueQuery:
    symbols: Tuple[str, ...]


@dataclass(frozen=True)
class PriceQuery:
    symbols: Tuple[str, ...]
    product: str


@dataclass(frozen=True)
class UnrecognizedQuery:
    line: str


Statement = Union[SymbolDefinition, PriceDefinition, ValueQuery, PriceQuery, UnrecognizedQuery]
