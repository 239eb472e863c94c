"""x86 (AT&T syntax) code generation.

Each printed line becomes a `puts` call on a `str_<n>` label in `.text`
and an `.asciz` entry under the same label in `.data`. Code is emitted
before data so `main` is the first thing in the stream. The text has no
trailing newline, the driver adds it when printing.
"""

import logging

from .model import PrintLine

logger = logging.getLogger(__name__)


class AsmGenerator:
    def __init__(self):
        self.output = []
        self.data_section = []
        self.label_count = 0
        self.arg_reg = "%edi"

    def new_label(self, prefix="str"):
        label = f"{prefix}_{self.label_count}"
        self.label_count += 1
        return label

    def emit(self, instruction):
        self.output.append(instruction)

    def emit_data(self, name, value):
        self.data_section.append(f"{name}:")
        self.data_section.append(f'    .asciz "{value}"')

    def generate_command(self, command):
        if isinstance(command, PrintLine):
            label = self.new_label()
            self.emit(f"    mov ${label}, {self.arg_reg}")
            self.emit("    call puts")
            self.emit_data(label, command.text)
        else:
            raise TypeError(f"no assembly translation for {type(command).__name__}")

    def generate_function(self, function):
        self.emit(".text")
        self.emit(".global main")
        self.emit("main:")
        for command in function.body:
            self.generate_command(command)

    def render(self):
        return "\n".join(self.output + [".data"] + self.data_section)


def compile_to_asm(program):
    cg = AsmGenerator()
    cg.generate_function(program.functions[0])
    logger.debug("emitted %d string label(s)", cg.label_count)
    return cg.render()
