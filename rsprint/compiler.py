from .asm_codegen import compile_to_asm
from .c_codegen import compile_to_c
from .errors import SourceReadError
from .host import parse_source
from .walker import parse_file, require_single_function

TARGETS = {
    "asm": compile_to_asm,
    "c": compile_to_c,
}


def read_source(path):
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise SourceReadError(f"unable to open `{path}`: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise SourceReadError(f"unable to read `{path}`: not valid UTF-8") from e


def compile_source(source, target="asm"):
    """Run the whole pipeline on Rust source text and return the generated code."""
    if target not in TARGETS:
        raise ValueError(f"unknown target {target!r}, expected one of {sorted(TARGETS)}")

    tree = parse_source(source)
    program = parse_file(tree)
    require_single_function(program)
    return TARGETS[target](program)
