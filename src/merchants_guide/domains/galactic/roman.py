# src/merchants_guide/domains/galactic/roman.py
from enum import Enum
from typing import Sequence

from ...errors import EmptySequenceError, InvalidNumeralError, NegativeResultError


class RomanLetter(Enum):
    I = 1
    V = 5
    X = 10
    L = 50
    C = 100
    D = 500
    M = 1000

    @classmethod
    def from_token(cls, token: str) -> "RomanLetter":
        """Looks up a letter by its exact uppercase spelling."""
        try:
            return cls[token]
        except KeyError:
            raise InvalidNumeralError(token) from None

    def __int__(self):
        return self.value


def resolve(letters: Sequence[RomanLetter]) -> int:
    """
    Converts an ordered sequence of letters into its decimal value.

    A letter followed by a letter of greater value is subtracted, every other
    letter is added. Only the direct successor is considered, so orderings
    that are not canonical numerals (e.g. IIX) still resolve as long as the
    total stays positive.
    """
    if not letters:
        raise EmptySequenceError()

    values = [int(letter) for letter in letters]
    total = 0
    for current, successor in zip(values, values[1:] + [None]):
        if successor is not None and successor > current:
            total -= current
        else:
            total += current

    if total <= 0:
        raise NegativeResultError(total)
    return total
