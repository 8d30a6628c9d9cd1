"""Minimal builder for AppSync VTL request/response mapping templates.

Templates are assembled as a small node tree and printed with ``print_block``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

_TAB = "  "


@dataclass(frozen=True)
class StringNode:
    value: str


@dataclass(frozen=True)
class ReferenceNode:
    value: str


@dataclass(frozen=True)
class QuietReferenceNode:
    value: str


@dataclass(frozen=True)
class RawNode:
    value: str


@dataclass(frozen=True)
class ObjectNode:
    attributes: tuple[tuple[str, Node], ...]


@dataclass(frozen=True)
class IfNode:
    predicate: Node
    expr: Node


@dataclass(frozen=True)
class CompoundExpressionNode:
    expressions: tuple[Node, ...]


Node = StringNode | ReferenceNode | QuietReferenceNode | RawNode | ObjectNode | IfNode | CompoundExpressionNode


def string(value: str) -> StringNode:
    return StringNode(value)


def ref(value: str) -> ReferenceNode:
    return ReferenceNode(value)


def qref(value: str) -> QuietReferenceNode:
    return QuietReferenceNode(value)


def raw(value: str) -> RawNode:
    return RawNode(value)


def obj(attributes: dict[str, Node]) -> ObjectNode:
    return ObjectNode(tuple(attributes.items()))


def iff(predicate: Node, expr: Node) -> IfNode:
    return IfNode(predicate, expr)


def compound_expression(expressions: Sequence[Node]) -> CompoundExpressionNode:
    return CompoundExpressionNode(tuple(expressions))


def print_node(node: Node, indent: str = "") -> str:
    if isinstance(node, StringNode):
        return f'"{node.value}"'
    if isinstance(node, ReferenceNode):
        return f"${node.value}"
    if isinstance(node, QuietReferenceNode):
        return f"$util.qr({node.value})"
    if isinstance(node, RawNode):
        return node.value
    if isinstance(node, ObjectNode):
        if not node.attributes:
            return "{}"
        inner = ",\n".join(
            f'{indent}{_TAB}"{key}": {print_node(value, indent + _TAB)}' for key, value in node.attributes
        )
        return "{\n" + inner + "\n" + indent + "}"
    if isinstance(node, IfNode):
        return (
            f"#if( {print_node(node.predicate, indent)} )\n"
            f"{indent}{_TAB}{print_node(node.expr, indent + _TAB)}\n"
            f"{indent}#end"
        )
    if isinstance(node, CompoundExpressionNode):
        return f"\n{indent}".join(print_node(expr, indent) for expr in node.expressions)
    raise TypeError(f"Unsupported template node: {type(node).__name__}")


def print_block(name: str) -> Callable[[Node], str]:
    """Return a printer that wraps a node in ``## [Start] <name>. **`` / ``## [End]`` markers."""

    def _print(node: Node) -> str:
        return f"## [Start] {name}. **\n{print_node(node)}\n## [End] {name}. **"

    return _print
