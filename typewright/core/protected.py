"""Syntax-aware exclusion zones for autocorrect."""

from abc import ABC, abstractmethod

from loguru import logger

# Node kinds in which no autocorrection may be applied
PROTECTED_NODE_KINDS = frozenset(
    {
        "InlineCode",  # `code`
        "CommentBlock",  # <!-- comment -->
        "FencedCode",  # ``` code block
        "CodeBlock",  # indented code block
        "CodeText",  # contents of a code block
        "HorizontalRule",
    }
)


class SyntaxTree(ABC):
    """Read-only syntax tree capability provided by the host."""

    @abstractmethod
    def resolve(self, position: int, side: int = 0) -> str:
        """Return the kind name of the innermost node covering position.

        Args:
            position: Document offset to resolve
            side: -1 enters nodes ending at position, 1 enters nodes starting
                at position, 0 only enters nodes strictly around it

        Returns:
            The node kind name, e.g. "InlineCode" or "Document"
        """


class ProtectedRegionClassifier:
    """Report whether a position lies in a node exempt from autocorrect."""

    def __init__(self, tree: SyntaxTree, protected_kinds: frozenset[str] = PROTECTED_NODE_KINDS):
        self.tree = tree
        self.protected_kinds = protected_kinds

    def is_protected(self, position: int) -> bool:
        """Check if position sits within a protected node.

        Args:
            position: Document offset to check

        Returns:
            True if the innermost node at position is protected
        """
        kind = self.tree.resolve(position, 0)
        if kind in self.protected_kinds:
            logger.debug(f"  Position {position} is inside protected node {kind}")
            return True
        return False
