"""Walk the host syntax tree and build a Program.

Only the println subset is accepted: top-level functions whose bodies are
nothing but `println!` invocations. Anything else raises on the first
offending node.
"""

import logging

from lark import Token, Tree

from .errors import MissingArgument, UnknownOperation, UnsupportedItem, UnsupportedProgram, UnsupportedStatement
from .model import Function, PrintLine, Program

logger = logging.getLogger(__name__)

PRINT_MACRO = "println"

ITEM_NAMES = {
    "struct_def": "struct",
    "enum_def": "enum",
    "const_def": "const",
    "static_def": "static",
    "type_alias": "type alias",
    "use_decl": "use declaration",
    "mod_decl": "module",
    "impl_block": "impl block",
    "item_macro": "macro invocation",
    "other_item": "item",
}

STATEMENT_NAMES = {
    "let_stmt": "`let` binding",
    "expr_stmt": "expression statement",
    "if_stmt": "`if` statement",
    "while_stmt": "`while` loop",
    "loop_stmt": "`loop`",
    "for_stmt": "`for` loop",
    "item_stmt": "nested item",
    "empty_stmt": "empty statement",
    "block": "nested block",
    "other_stmt": "statement",
}

MACRO_SHAPES = ("macro_call", "macro_stmt")


def get_name_token(node):
    for child in node.children:
        if isinstance(child, Token) and child.type == "NAME":
            return child
    return None


def first_word(node):
    """First token of `node` after any attributes and visibility."""
    for child in node.children:
        if isinstance(child, Token):
            return child.value
        if child.data in ("attribute", "visibility"):
            continue
        for tok in child.scan_values(lambda v: isinstance(v, Token)):
            return tok.value
    return None


def describe(node, names, default):
    data = getattr(node, "data", None)
    kind = names.get(data, default)
    if data in ("other_item", "other_stmt"):
        kind = f"`{first_word(node)}` {kind}"
    return kind


def token_text(tt):
    """Source text of one macro token, with nested groups spaced out."""
    if isinstance(tt, Token):
        return tt.value
    if tt.data == "tt_token":
        return tt.children[0].value
    open_tok, *inner, close_tok = tt.children
    return open_tok.value + " ".join(token_text(c) for c in inner) + close_tok.value


def parse_macro(node):
    path, tokens = node.children
    name = "::".join(tok.value for tok in path.children)
    if name != PRINT_MACRO:
        raise UnknownOperation(name, path)

    args = tokens.children[1:-1]
    if not args:
        raise MissingArgument(f"expected argument to `{name}!`", node)

    return PrintLine(token_text(args[0]).replace('"', ""))


def parse_body(block):
    commands = []
    for child in block.children:
        stmt = child
        if isinstance(child, Tree) and child.data == "expr_stmt":
            stmt = child.children[0]

        if not (isinstance(stmt, Tree) and stmt.data in MACRO_SHAPES):
            kind = describe(child, STATEMENT_NAMES, "expression")
            raise UnsupportedStatement(f"unexpected {kind}", child)

        commands.append(parse_macro(stmt))
    return tuple(commands)


def parse_fn(node):
    name_tok = get_name_token(node)
    block = next(c for c in node.children if isinstance(c, Tree) and c.data == "block")
    body = parse_body(block)
    logger.debug("function `%s`: %d command(s)", name_tok.value, len(body))
    return Function(name_tok.value, body)


def parse_file(tree):
    """Build a Program from a whole-file tree, one Function per `fn` item."""
    functions = []
    for node in tree.children:
        if isinstance(node, Tree) and node.data == "function":
            functions.append(parse_fn(node))
            continue

        kind = describe(node, ITEM_NAMES, "item")
        raise UnsupportedItem(f"unexpected top-level {kind}", node)

    logger.debug("program with %d function(s)", len(functions))
    return Program(tuple(functions))


def require_single_function(program):
    """Return the only function of `program`.

    Code generators compile a single function into `main`, so programs with
    no function or with several are rejected here instead of having the
    extra functions silently dropped.
    """
    if not program.functions:
        raise UnsupportedProgram("no function to compile")
    if len(program.functions) > 1:
        names = ", ".join(f"`{fn.name}`" for fn in program.functions)
        raise UnsupportedProgram(f"only single-function programs are supported, found {names}")
    return program.functions[0]
