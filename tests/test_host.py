"""Tests for the lark-based Rust parser front end."""

import unittest

from lark import Tree

from rsprint.errors import HostParseError
from rsprint.host import parse_source

KITCHEN_SINK = """
// every kind of item the grammar knows about
use std::fmt;

#[derive(Debug)]
pub struct Point {
    pub x: i32,
    y: i32,
}

struct Unit;
struct Pair(i32, String);

enum Shape {
    Circle(f64),
    Square { side: f64 },
    Empty = 3,
}

const GREETING: &'static str = "hello";
static mut COUNT: u32 = 0;
type Id = u64;

mod inner {
    fn helper() {}
}

impl Point {
    pub fn new(x: i32) -> Self {
        let p = Point::origin();
        p
    }
}

macro_rules! noop {
    () => {};
}

fn main() {
    let mut total: i32 = 0;
    for i in 0..10 {
        total += i;
    }
    while total > 5 {
        total -= 1;
    }
    if total == 0 {
        return;
    } else if total < 0 {
        loop {
            break;
        }
    }
    /* block comment */
    let v = vec![1, 2, 3];
    println!("{} {}", total, v[0]);
}
"""


class TestHostParser(unittest.TestCase):

    def test_parses_items(self):
        tree = parse_source(KITCHEN_SINK)
        kinds = [node.data for node in tree.children]
        self.assertEqual(kinds, [
            "use_decl", "struct_def", "struct_def", "struct_def", "enum_def",
            "const_def", "static_def", "type_alias", "mod_decl", "impl_block",
            "item_macro", "function",
        ])

    def test_println_shape(self):
        tree = parse_source('fn main() {\n    println!("hi");\n}\n')
        fn = tree.children[0]
        block = fn.children[-1]
        self.assertEqual(block.data, "block")

        stmt = block.children[0]
        self.assertEqual(stmt.data, "expr_stmt")
        call = stmt.children[0]
        self.assertEqual(call.data, "macro_call")

        path, tokens = call.children
        self.assertEqual([t.value for t in path.children], ["println"])
        self.assertEqual(tokens.data, "delim_tt")
        self.assertEqual(tokens.children[0].value, "(")
        self.assertEqual(tokens.children[-1].value, ")")
        self.assertIsInstance(tokens.children[1], Tree)
        self.assertEqual(tokens.children[1].children[0].value, '"hi"')

    def test_positions(self):
        tree = parse_source('\n\nfn main() {\n    let x = 1;\n}\n')
        stmt = tree.children[0].children[-1].children[0]
        self.assertEqual(stmt.data, "let_stmt")
        self.assertEqual((stmt.meta.line, stmt.meta.column), (4, 5))

    def test_empty_file(self):
        tree = parse_source("")
        self.assertEqual(tree.children, [])

    def test_bad_character(self):
        with self.assertRaises(HostParseError) as ctx:
            parse_source("fn main() { ` }")
        self.assertEqual(ctx.exception.line, 1)
        self.assertEqual(ctx.exception.code, "E002")

    def test_unbalanced_delimiter_line(self):
        source = 'fn main() {\n    println!("a";\n}\n'
        with self.assertRaises(HostParseError) as ctx:
            parse_source(source)
        self.assertEqual(ctx.exception.line, 3)

    def test_unterminated(self):
        with self.assertRaises(HostParseError):
            parse_source("fn main() {")


if __name__ == "__main__":
    unittest.main()
