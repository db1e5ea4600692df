"""Expression tree for HULK programs and its indented text rendering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto


class NodeType(Enum):
    """Kinds of tree nodes."""

    NUM = auto()
    VAR = auto()
    STRING = auto()
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    CONCAT = auto()
    GT = auto()
    LT = auto()
    EQ = auto()
    GE = auto()
    LE = auto()
    PRINT = auto()
    IF = auto()
    SEQ = auto()
    LET = auto()
    BINDING = auto()


_BINARY_LABELS = {
    NodeType.ADD: "ADD",
    NodeType.SUB: "SUB",
    NodeType.CONCAT: "CONCAT",
    NodeType.MUL: "MUL",
    NodeType.DIV: "DIV",
    NodeType.GT: "GT",
    NodeType.LT: "LT",
    NodeType.EQ: "EQ",
    NodeType.GE: "GE",
    NodeType.LE: "LE",
    NodeType.SEQ: "SEQ",
}


@dataclass
class Binding:
    """A ``name = value`` pair introduced by a ``let`` expression."""

    name: str
    value: Node | None


@dataclass
class Node:
    """A tree node.

    ``value`` holds the number of a NUM node, the name of a VAR node or the
    text of a STRING node. ``left`` is the operand, the then-branch of an IF,
    or the body of a LET.
    """

    type: NodeType
    value: int | str | None = None
    left: Node | None = None
    right: Node | None = None
    condition: Node | None = None
    else_branch: Node | None = None
    bindings: list[Binding] = field(default_factory=list)


def num_node(value: int) -> Node:
    """Return a numeric literal node."""
    return Node(NodeType.NUM, value=value)


def var_node(name: str) -> Node:
    """Return a variable reference node."""
    return Node(NodeType.VAR, value=name)


def string_node(value: str) -> Node:
    """Return a string literal node."""
    return Node(NodeType.STRING, value=value)


def op_node(node_type: NodeType, left: Node | None, right: Node | None) -> Node:
    """Return a node of ``node_type`` with two operands."""
    return Node(NodeType(node_type), left=left, right=right)


def print_node(expr: Node | None) -> Node:
    """Return a node that prints ``expr``."""
    return Node(NodeType.PRINT, left=expr)


def if_node(
    condition: Node | None, then_branch: Node | None, else_branch: Node | None
) -> Node:
    """Return a conditional node."""
    return Node(
        NodeType.IF, left=then_branch, condition=condition, else_branch=else_branch
    )


def seq_node(first: Node | None, second: Node | None) -> Node:
    """Return a node that evaluates ``first`` then ``second``."""
    return Node(NodeType.SEQ, left=first, right=second)


def let_node(bindings: Iterable[Binding], body: Node | None) -> Node:
    """Return a ``let`` node binding ``bindings`` in ``body``."""
    return Node(NodeType.LET, left=body, bindings=list(bindings))


def _binding_lines(bindings: list[Binding], indent: int) -> Iterator[str]:
    for binding in bindings:
        yield f"{' ' * indent}Binding: {binding.name} = "
        yield from _lines(binding.value, indent + 1)


def _lines(node: Node | None, indent: int) -> Iterator[str]:
    if node is None:
        return
    pad = "  " * indent
    inner = "  " * (indent + 1)
    kind = node.type

    if kind is NodeType.NUM:
        yield f"{pad}NUM: {node.value}"
    elif kind is NodeType.VAR:
        yield f"{pad}Variable: {node.value}"
    elif kind is NodeType.STRING:
        yield f"{pad}String : {node.value}"
    elif kind in _BINARY_LABELS:
        yield f"{pad}{_BINARY_LABELS[kind]}"
        yield from _lines(node.left, indent + 1)
        yield from _lines(node.right, indent + 1)
    elif kind is NodeType.PRINT:
        yield f"{pad}PRINT"
        yield from _lines(node.left, indent + 1)
    elif kind is NodeType.IF:
        yield f"{pad}IF"
        yield f"{inner}Condition:"
        yield from _lines(node.condition, indent + 2)
        yield f"{inner}Then:"
        yield from _lines(node.left, indent + 2)
        yield f"{inner}Else:"
        yield from _lines(node.else_branch, indent + 2)
    elif kind is NodeType.LET:
        yield f"{pad}LET:"
        yield from _binding_lines(node.bindings, indent + 1)
        yield f"{pad}Body:"
        yield from _lines(node.left, indent + 1)
    else:
        yield f"{pad}Unknown AST node type"


def format_ast(node: Node | None, indent: int = 0) -> str:
    """Return the indented rendering of ``node``, one line per entry."""
    return "".join(f"{line}\n" for line in _lines(node, indent))


def print_ast(node: Node | None, indent: int = 0) -> None:
    """Write the rendering of ``node`` to standard output."""
    print(format_ast(node, indent), end="")