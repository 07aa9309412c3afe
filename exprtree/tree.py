"""Expression trees entered in prefix notation."""

from __future__ import annotations

import contextlib
import math
import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Sequence

from exprtree.result import Error, Result

OPERATORS = "+-/*"
TRIG_FUNCTIONS = ("sin", "cos")
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InsertError(ValueError):
    """Raised when a token cannot be placed in the tree."""


class NodeKind(Enum):
    VALUE = "value"
    OPERATOR = "operator"
    VARIABLE = "variable"
    TRIG = "trig"

    @property
    def arity(self) -> int:
        return _ARITY[self]


_ARITY = {
    NodeKind.VALUE: 0,
    NodeKind.VARIABLE: 0,
    NodeKind.OPERATOR: 2,
    NodeKind.TRIG: 1,
}


@dataclass(eq=False)
class Node:
    """A tree node; empty child slots are None."""

    kind: NodeKind
    value: int | str
    children: list[Node | None] = field(default_factory=list)
    parent: Node | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.children:
            self.children = [None] * self.kind.arity

    def copy(self) -> Node:
        """Deep copy of this subtree, detached from any parent."""
        clone = Node(self.kind, self.value)
        for index, child in enumerate(self.children):
            if child is not None:
                child_copy = child.copy()
                child_copy.parent = clone
                clone.children[index] = child_copy
        return clone

    def _walk(self) -> Iterator[Node]:
        yield self
        for child in self.children:
            if child is not None:
                yield from child._walk()

    def _free_slot(self) -> int | None:
        return next((i for i, child in enumerate(self.children) if child is None), None)


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_BINARY: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def _clean(text: str) -> str:
    """Drop unsupported characters and collapse whitespace runs to one space."""
    kept: list[str] = []
    in_space = False
    for ch in text.lstrip(_WHITESPACE):
        if (ch.isascii() and ch.isalnum()) or ch in OPERATORS:
            kept.append(ch)
            in_space = False
        elif ch in _WHITESPACE and not in_space:
            kept.append(" ")
            in_space = True
    return "".join(kept).rstrip(" ")


def _first_leaf(node: Node) -> tuple[Node, int] | None:
    for index, child in enumerate(node.children):
        if child is None or not child.children:
            return node, index
        found = _first_leaf(child)
        if found is not None:
            return found
    return None


class Tree:
    """An arithmetic expression tree filled from prefix-notation tokens."""

    def __init__(self) -> None:
        self.root: Node | None = None
        self._cursor: Node | None = None
        self._variables: list[str] = []

    @classmethod
    def _from_root(cls, root: Node | None) -> Tree:
        tree = cls()
        tree.root = root
        tree._cursor = root
        if root is not None:
            for node in root._walk():
                if node.kind is NodeKind.VARIABLE and node.value not in tree._variables:
                    tree._variables.append(node.value)
        return tree

    def copy(self) -> Tree:
        """Deep copy of the tree and its variable list."""
        tree = Tree()
        tree.root = self.root.copy() if self.root is not None else None
        tree._cursor = tree.root
        tree._variables = list(self._variables)
        return tree

    def __add__(self, other: Tree) -> Tree:
        if not isinstance(other, Tree):
            return NotImplemented
        if self.root is None and other.root is None:
            return Tree()
        if self.root is None or not self.root.children:
            return Tree._from_root(other.root.copy() if other.root is not None else None)
        if other.root is None:
            return Tree._from_root(self.root.copy())

        root = self.root.copy()
        graft = other.root.copy()
        found = _first_leaf(root)
        if found is None:
            return Tree._from_root(root)
        parent, slot = found
        if parent.children[slot] is None:
            # An unfilled slot has no parent link, so the graft becomes the whole tree.
            return Tree._from_root(graft)
        graft.parent = parent
        parent.children[slot] = graft
        return Tree._from_root(root)

    @staticmethod
    def _parse_token(token: int | str) -> Node:
        if isinstance(token, int):
            return Node(NodeKind.VALUE, token)
        token = "".join(ch for ch in token if ch not in _WHITESPACE)
        if any(op in token for op in OPERATORS):
            if len(token) != 1:
                raise InsertError(f"malformed operator token {token!r}")
            return Node(NodeKind.OPERATOR, token)
        if token in TRIG_FUNCTIONS:
            return Node(NodeKind.TRIG, token)
        if all(ch in _DIGITS for ch in token):
            return Node(NodeKind.VALUE, int(token) if token else 0)
        return Node(NodeKind.VARIABLE, token)

    def _place(self, node: Node) -> None:
        if self.root is None:
            self.root = node
            self._cursor = node
            return
        cursor = self._cursor if self._cursor is not None else self.root
        while (slot := cursor._free_slot()) is None:
            if cursor.parent is None:
                self._cursor = cursor
                raise InsertError(f"no free place for {node.value!r}")
            cursor = cursor.parent
        self._cursor = cursor
        node.parent = cursor
        cursor.children[slot] = node
        if node.kind in (NodeKind.OPERATOR, NodeKind.TRIG):
            self._cursor = node

    def insert(self, token: int | str) -> None:
        """Place one token at the next free position; raise InsertError if impossible."""
        node = self._parse_token(token)
        self._place(node)
        if node.kind is NodeKind.VARIABLE and node.value not in self._variables:
            self._variables.append(node.value)

    def _pad(self) -> bool:
        try:
            self.insert(1)
        except InsertError:
            return False
        return True

    def enter(self, text: str) -> bool:
        """Insert every token of ``text``; fill one missing operand with 1.

        Returns True when the tree was already complete.
        """
        self._cursor = self.root
        for token in _clean(text).split(" "):
            with contextlib.suppress(InsertError):
                self.insert(token)
        return not self._pad()

    def _is_full(self) -> bool:
        if self._cursor is not self.root:
            return True
        node = self.root
        if node is None:
            return False
        while node.kind in (NodeKind.OPERATOR, NodeKind.TRIG):
            last = node.children[-1]
            if last is None:
                return False
            node = last
        return True

    def checked_enter(self, text: str) -> Result[None]:
        """Like ``enter``, but report every problem as an error."""
        errors: list[Error] = []
        cleaned = _clean(text)
        if len(cleaned) != len(text) or not cleaned:
            errors.append(Error("Incorrect input format!"))

        self._cursor = self.root
        for token in cleaned.split(" "):
            try:
                self.insert(token)
            except InsertError:
                if self._is_full():
                    errors.append(
                        Error(f"Couldn't add element to tree: '{token}', tree is already full!")
                    )
                else:
                    errors.append(Error(f"Couldn't add element to tree: '{token}'!"))

        if self._pad():
            errors.append(Error("Equation incorrect | not enough values or variables!"))
        return Result.fail(errors) if errors else Result.ok()

    def prefix(self) -> str:
        """The tree in prefix notation, each token followed by a space."""
        if self.root is None:
            return ""
        return "".join(f"{node.value} " for node in self.root._walk())

    def variables(self) -> list[str]:
        """Variable names in order of first appearance."""
        return list(self._variables)

    def calculate(self, values: Sequence[int]) -> int:
        """Evaluate with ``values`` given in the order of ``variables()``."""
        if self.root is None:
            raise ValueError("the tree is empty")
        return self._evaluate(self.root, values)

    def _evaluate(self, node: Node | None, values: Sequence[int]) -> int:
        if node is None:
            raise ValueError("the expression is incomplete")
        if node.kind is NodeKind.TRIG:
            function = math.sin if node.value == "sin" else math.cos
            return int(function(self._evaluate(node.children[0], values)))
        if node.kind is NodeKind.OPERATOR:
            left = self._evaluate(node.children[0], values)
            right = self._evaluate(node.children[1], values)
            return _BINARY[node.value](left, right)
        if node.kind is NodeKind.VALUE:
            return node.value
        try:
            return values[self._variables.index(node.value)]
        except (ValueError, IndexError):
            raise ValueError(f"no value supplied for variable {node.value!r}") from None

    def count_greater(self, value: int) -> int:
        """Number of constants in the tree greater than ``value``."""
        if self.root is None:
            return 0
        return sum(
            1
            for node in self.root._walk()
            if node.kind is NodeKind.VALUE and node.value > value
        )