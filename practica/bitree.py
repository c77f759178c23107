"""Binary trees of characters built from a preorder description."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass

NULL_MARK = "#"


@dataclass
class Node:
    """A tree node holding one character."""

    value: str
    left: Node | None = None
    right: Node | None = None


def build_tree(text):
    """Build a tree from preorder characters, ``#`` marking an empty subtree."""
    chars = iter(text)

    def build():
        try:
            ch = next(chars)
        except StopIteration:
            raise ValueError("tree description ends early") from None
        if ch == NULL_MARK:
            return None
        node = Node(ch)
        node.left = build()
        node.right = build()
        return node

    return build()


def depth(root):
    """Number of levels in the tree; an empty tree has depth 0."""
    if root is None:
        return 0
    return max(depth(root.left), depth(root.right)) + 1


def _level_order(root):
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(child for child in (node.left, node.right) if child is not None)


def parent_value(root, value):
    """Value of the first node, level by level, with a child holding ``value``."""
    for node in _level_order(root):
        if any(child is not None and child.value == value for child in (node.left, node.right)):
            return node.value
    return None


def find(root, value):
    """First node, level by level, holding ``value``, or None."""
    return next((node for node in _level_order(root) if node.value == value), None)


def postorder(root):
    """Node values in postorder, joined into a string."""
    values = []
    stack = []
    last = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            top = stack[-1]
            if top.right is not None and top.right is not last:
                node = top.right
            else:
                values.append(top.value)
                last = stack.pop()
    return "".join(values)


def main(argv=None):
    """Build a tree from the argument or standard input and report on it."""
    parser = argparse.ArgumentParser(description="Inspect a binary tree.")
    parser.add_argument("tree", nargs="?")
    args = parser.parse_args(argv)
    text = args.tree if args.tree is not None else sys.stdin.readline().strip()
    try:
        root = build_tree(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"ret: {depth(root)}")
    parent = parent_value(root, "e")
    print(f"ch: {parent if parent is not None else NULL_MARK}")
    found = find(root, "b")
    if found is not None:
        print(f"ch:{found.value}")
    print("post order:")
    print(postorder(root))
    return 0