# src/merchants_guide/framework/base_interpreter.py
from functools import lru_cache

from lark import Lark, Transformer, v_args
from lark.exceptions import VisitError

__all__ = ["BaseInterpreter", "build_parser", "execute_dsl", "v_args"]


class BaseInterpreter(Transformer):
    def TOKEN(self, token):
        return token.value


@lru_cache(maxsize=None)
def build_parser(grammar_path: str, start: tuple) -> Lark:
    """
    Compiles the grammar at `grammar_path` once per process.

    Earley with the dynamic lexer lets a keyword such as `is` also be read as
    an ordinary token wherever the grammar expects one.
    """
    with open(grammar_path, 'r', encoding='utf-8') as f:
        grammar = f.read()

    return Lark(grammar, start=list(start), parser='earley', lexer='dynamic')


def execute_dsl(dsl_text: str, parser: Lark, interpreter_instance, start: str = None):
    """
    Parses DSL text and runs an already created interpreter over the tree.

    Args:
        dsl_text: The string containing the DSL code.
        parser: A parser returned by build_parser.
        interpreter_instance: The transformer that turns the tree into a result.
        start: The start rule to parse with, when the grammar has several.

    Grammar errors surface as lark.exceptions.UnexpectedInput. Errors raised by
    the interpreter's own callbacks are re-raised as-is rather than wrapped.
    """
    tree = parser.parse(dsl_text, start=start)

    try:
        return interpreter_instance.transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
