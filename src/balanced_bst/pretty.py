"""Indented text rendering of a tree, right subtree on top."""

from typing import List, Optional

from .node import Node

RIGHT_BRANCH = "┌── "
LEFT_BRANCH = "└── "
CONTINUE = "|   "
BLANK = "    "


def _render(node: Node, prefix: str, is_left: bool, lines: List[str]) -> None:
    if node.right is not None:
        _render(node.right, prefix + (CONTINUE if is_left else BLANK), False, lines)

    lines.append(prefix + (LEFT_BRANCH if is_left else RIGHT_BRANCH) + str(node.key))

    if node.left is not None:
        _render(node.left, prefix + (BLANK if is_left else CONTINUE), True, lines)


def render(node: Optional[Node], prefix: str = "", is_left: bool = True) -> str:
    """
    Render the subtree rooted at ``node`` as indented lines.

    Args:
        node: Subtree root, or None for an empty tree
        prefix: Text prepended to every line
        is_left: Whether ``node`` hangs off a left branch (the root counts as left)

    Returns:
        Newline-joined rendering, empty string for an empty subtree
    """
    if node is None:
        return ""
    lines: List[str] = []
    _render(node, prefix, is_left, lines)
    return "\n".join(lines)
