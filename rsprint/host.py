"""Host-language parser.

Wraps lark so the rest of the package only ever sees a lark Tree or a
HostParseError.
"""

import logging
import os

from lark import Lark
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .errors import HostParseError

logger = logging.getLogger(__name__)

GRAMMAR_PATH = os.path.join(os.path.dirname(__file__), "rust.lark")

with open(GRAMMAR_PATH, encoding="utf-8") as f:
    rust_grammar = f.read()

parser = Lark(
    rust_grammar,
    start="start",
    parser="earley",
    lexer="basic",
    propagate_positions=True,
)


def describe_failure(err):
    if isinstance(err, UnexpectedCharacters):
        return f"unexpected character {err.char!r}"
    if isinstance(err, UnexpectedEOF):
        return "unexpected end of file"
    if isinstance(err, UnexpectedToken):
        if err.token.type == "$END":
            return "unexpected end of file"
        return f"unexpected token `{err.token.value}`"
    return "unable to parse file"


def parse_source(source):
    """Parse Rust source text into a generic lark Tree."""
    try:
        tree = parser.parse(source)
    except UnexpectedInput as err:
        line = getattr(err, "line", None)
        if not isinstance(line, int) or line < 1:
            line = None
        column = err.column if line is not None else None
        raise HostParseError(describe_failure(err), line=line, column=column) from err
    logger.debug("parsed %d top-level item(s)", len(tree.children))
    return tree
