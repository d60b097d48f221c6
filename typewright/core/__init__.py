"""Core domain logic for typewright."""

from .config import (
    AutocorrectConfig,
    MagicQuotePair,
    MagicQuotes,
    default_replacements,
    load_config,
    load_config_file,
)
from .protected import PROTECTED_NODE_KINDS, ProtectedRegionClassifier, SyntaxTree
from .replacements import ReplacementRule, ReplacementTable
from .transaction import Transaction, TransactionBuilder, map_position
from .types import CursorRange, Edit, Line
from .view import EditorState, EditorView

__all__ = [
    "AutocorrectConfig",
    "CursorRange",
    "Edit",
    "EditorState",
    "EditorView",
    "Line",
    "MagicQuotePair",
    "MagicQuotes",
    "PROTECTED_NODE_KINDS",
    "ProtectedRegionClassifier",
    "ReplacementRule",
    "ReplacementTable",
    "SyntaxTree",
    "Transaction",
    "TransactionBuilder",
    "default_replacements",
    "load_config",
    "load_config_file",
    "map_position",
]
