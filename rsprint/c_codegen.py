from .model import PrintLine


def c_statement(command):
    if isinstance(command, PrintLine):
        # payload is embedded as-is, no escaping
        return f'    puts("{command.text}");'
    raise TypeError(f"no C translation for {type(command).__name__}")


def compile_to_c(program):
    """Render the first function of `program` as a C translation unit."""
    lines = ["#include <stdio.h>", "int main() {"]
    for command in program.functions[0].body:
        lines.append(c_statement(command))
    lines.append("}")
    return "\n".join(lines) + "\n"
