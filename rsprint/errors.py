from lark import Token


def locate(node):
    """Return (line, column, length) for a lark Token or Tree, or Nones."""
    if node is None:
        return None, None, 1
    if isinstance(node, Token):
        return node.line, node.column, len(node.value)
    meta = getattr(node, "meta", None)
    if meta is None or meta.empty:
        return None, None, 1
    return meta.line, meta.column, 1


class CompileError(Exception):
    """Base class for everything that aborts a compilation.

    Carries the source position of the offending node so the driver can
    print it the same way for every stage.
    """

    code = "E000"

    def __init__(self, msg, node=None, line=None, column=None):
        super().__init__(msg)
        self.msg = msg
        self.line, self.column, self.length = locate(node)
        if line is not None:
            self.line, self.column = line, column

    def render(self, source=None):
        header = f"error: {self.msg} [{self.code}]"
        if source is None or self.line is None or self.line < 1:
            return header

        lines = source.splitlines()
        if self.line > len(lines):
            return header

        src = lines[self.line - 1]
        col = max(self.column or 1, 1)
        width = min(self.length, max(len(src) - col + 1, 1))
        ptr = " " * (col - 1) + "^" * max(width, 1)
        return f"{self.line:>4} | {src}\n     | {ptr} {header}"


class SourceReadError(CompileError):
    code = "E001"


class HostParseError(CompileError):
    code = "E002"


class UnsupportedItem(CompileError):
    code = "E003"


class UnsupportedStatement(CompileError):
    code = "E004"


class UnknownOperation(CompileError):
    code = "E005"

    def __init__(self, name, node=None):
        super().__init__(f"unknown macro `{name}!`", node)
        self.name = name


class MissingArgument(CompileError):
    code = "E006"


class UnsupportedProgram(CompileError):
    code = "E007"
