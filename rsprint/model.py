"""Program model handed from the walker to the code generators.

A Program is a tuple of Functions, a Function is a tuple of Commands.
Everything is frozen: the walker builds it once and nothing mutates it
afterwards.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Command:
    """Base of the command variants. Code generators dispatch on the subclass."""


@dataclass(frozen=True)
class PrintLine(Command):
    # quotes already removed, nothing else escaped
    text: str


@dataclass(frozen=True)
class Function:
    name: str
    body: Tuple[Command, ...] = ()


@dataclass(frozen=True)
class Program:
    functions: Tuple[Function, ...] = ()
