# src/merchants_guide/errors.py
"""Errors raised while interpreting merchant's guide input.

Every error is fatal to the run. The offending token or line is kept on the
exception so the caller can point the user at the bad input.
"""


class MerchantsGuideError(ValueError):
    """Base class for every error the interpreter raises."""

    # 1-based input line number, filled in by the driver when known
    lineno = None


class InvalidNumeralError(MerchantsGuideError):
    def __init__(self, token):
        super().__init__(f"Invalid Roman numeral: '{token}'")
        self.token = token


class InvalidNumberError(MerchantsGuideError):
    def __init__(self, token):
        super().__init__(f"Could not parse floating point number from '{token}'")
        self.token = token


class UnparseableLineError(MerchantsGuideError):
    def __init__(self, line):
        super().__init__(f"'{line}' could not be parsed")
        self.line = line


class UnboundSymbolError(MerchantsGuideError, KeyError):
    def __init__(self, symbol):
        super().__init__(f"No roman value was associated with symbol '{symbol}'")
        self.symbol = symbol

    # KeyError.__str__ would wrap the message in quotes
    __str__ = MerchantsGuideError.__str__


class UnknownProductError(MerchantsGuideError, KeyError):
    def __init__(self, product):
        super().__init__(f"Product named '{product}' was not yet encountered")
        self.product = product

    __str__ = MerchantsGuideError.__str__


class EmptySequenceError(MerchantsGuideError):
    def __init__(self):
        super().__init__("No romans literals provided")


class NegativeResultError(MerchantsGuideError):
    def __init__(self, total):
        super().__init__(f"Converted romans into negative decimal value {total}")
        self.total = total


class InputFileError(MerchantsGuideError):
    def __init__(self, path, reason):
        super().__init__(f"Could not open '{path}' for reading: {reason}")
        self.path = path


class UnreadableInputError(MerchantsGuideError):
    def __init__(self, reason):
        super().__init__(f"Failed to read at least one line from input: {reason}")
