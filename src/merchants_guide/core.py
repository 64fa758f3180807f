# src/merchants_guide/core.py
import logging
from typing import Iterable, Iterator, TextIO

from .config import AppConfig
from .domains.galactic.interpreter import InterpreterState
from .errors import InputFileError, MerchantsGuideError, UnreadableInputError

log = logging.getLogger(__name__)


# --- Line Processing ---
def answers(lines: Iterable[str], state: InterpreterState = None) -> Iterator[str]:
    """
    Feeds lines into the interpreter in order and yields each answer as soon
    as it is produced.

    Processing stops at the first error, which is re-raised with the 1-based
    number of the offending line. Answers already yielded stay valid.
    """
    state = state or InterpreterState()
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip('\r\n')
        try:
            answer = state.process_line(line)
        except MerchantsGuideError as e:
            e.lineno = lineno
            log.debug("Stopped at line %d: %s", lineno, e)
            raise
        if answer is not None:
            log.debug("Line %d answered: %s", lineno, answer)
            yield answer


# --- Stream Handling ---
def answer_stream(input_stream: TextIO, output_stream: TextIO) -> int:
    """Writes one answer line per query read from `input_stream`. Returns the number of answers."""
    count = 0
    for answer in answers(input_stream):
        output_stream.write(answer + '\n')
        count += 1
    return count


def answer_file(path: str, output_stream: TextIO) -> int:
    try:
        input_stream = open(path, 'r', encoding=AppConfig.INPUT_ENCODING)
    except OSError as e:
        raise InputFileError(path, e.strerror or e) from e

    with input_stream:
        try:
            return answer_stream(input_stream, output_stream)
        except UnicodeDecodeError as e:
            raise UnreadableInputError(e) from e
