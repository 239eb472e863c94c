from .compiler import compile_source, read_source
from .errors import (
    CompileError,
    HostParseError,
    MissingArgument,
    SourceReadError,
    UnknownOperation,
    UnsupportedItem,
    UnsupportedProgram,
    UnsupportedStatement,
)
from .model import Command, Function, PrintLine, Program

__version__ = "0.1.0"
