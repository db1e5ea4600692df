# hulk

Tools for the HULK language: a lexer driven by a state-transition table, and
a small syntax-tree model with an indented tree printer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Tokenising from the command line

```
hulk-lex program.hulk
```

This prints one token per line, in the form
`<type number> <lexeme> <line> <column>`, where the type number is the
integer value of the token's `TokenType`. When no file is given,
`example.hulk` in the current directory is read. If the file cannot be
opened, an error is written to standard error and the command exits with
status 1.

## Tokenising from Python

```python
from hulk.scanner import DFAScanner, scan

tokens = scan('let x := 42 in print("hi");')
for token in tokens:
    print(token)

scanner = DFAScanner("a := b + 1.5")
tokens = scanner.scan_tokens()
```

`hulk.tokens` defines `TokenType`, an `IntEnum` of token kinds, and `Token`,
a frozen dataclass with `type`, `lexeme`, `line` and `col` fields. Lines and
columns start at 1 and give where the token begins. `str(token)` gives the
same text the command prints. The last token is always
`TokenType.TOKEN_EOF` with an empty lexeme.

### How the scanner reads text

The scanner takes the longest match its transition table accepts. Then:

- Identifiers are letters, digits and `_`, starting with a letter or `_`.
  Keywords such as `let`, `in`, `if`, `elif`, `else`, `while`, `for`,
  `function`, `print`, `type`, `protocol`, `inherits`, `extends`, `new`,
  `base`, `is`, `as`, `True`, `False`, and the built-ins `sin`, `cos`,
  `sqrt`, `exp`, `log`, `rand`, `range`, `invoke`, `other` get their own
  token types; other words are `IDENTIFIER`.
- Numbers are digits with an optional fractional part (`42`, `1.5`). A
  number ending in a dot, such as `12.`, is dropped.
- Strings are double-quoted ASCII text and may contain the escapes `\n`,
  `\t`, `\r`, `\"` and `\\`. A string that is not closed is dropped.
- Two-character operators `==`, `!=`, `<=`, `>=`, `:=`, `=>`, `->` and
  `::` are recognised, as are the single characters
  `+ * % ^ & | @ . ; , ( ) [ ] { }` and `/` (as `DIV`).
- The single characters `=`, `!`, `<`, `>`, `-` and `:` on their own are
  not given a token type and are dropped from the stream.
- Whitespace and any character the table does not recognise are dropped.
- `//` has no comment handling of its own: it comes out as two `DIV`
  tokens, and the text after it is scanned as ordinary input.

## Syntax trees

`hulk.syntax_tree` provides `NodeType`, `Node` and `Binding`, with a
builder for each kind of node: `num_node`, `var_node`, `string_node`,
`op_node`, `print_node`, `if_node`, `seq_node` and `let_node`.

```python
from hulk.syntax_tree import (
    Binding, NodeType, let_node, num_node, op_node, print_ast, print_node, var_node,
)

tree = let_node(
    [Binding("x", num_node(2))],
    print_node(op_node(NodeType.ADD, var_node("x"), num_node(3))),
)
print_ast(tree)
```

prints

```
LET:
 Binding: x = 
    NUM: 2
Body:
  PRINT
    ADD
      Variable: x
      NUM: 3
```

`format_ast(node, indent=0)` returns the same text as a string instead of
writing it to standard output. Missing children (`None`) are skipped.

## What this package does not do

There is no parser: tokens are not turned into syntax trees, so trees must
be built with the builder functions. Nothing evaluates or compiles a tree;
the package only scans source text and prints trees.