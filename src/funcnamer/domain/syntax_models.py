from __future__ import annotations

"""
Syntax Tree Domain Models.

Defines the tagged node variant used by the annotation engine, the
per-file syntax tree container, the name counter and the engine's
exception types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class ParseError(Exception):
    """
    Raised when source text cannot be parsed into a syntax tree.

    Attributes:
        message: Human-readable description of the failure.
        line: 1-based line number of the failure, when known.
    """

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        super().__init__(f"Line {line}: {message}" if line else message)


class GenerationError(Exception):
    """Raised when a mutated tree cannot be serialized back to source text."""


# -----------------------------------------------------------------------------
# TREE MODELS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Node:
    """
    A syntax tree node, tagged by its ESTree ``type``.

    Field values are scalars, child Nodes or lists of child Nodes, kept in
    the order the parser produced them. ``range`` holds the (start, end)
    character offsets in the source; nodes built by the engine have none.
    """
    type: str
    fields: Dict[str, Any] = field(default_factory=dict)
    range: Optional[Tuple[int, int]] = None

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self.fields[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.fields[name] = value

    @classmethod
    def identifier(cls, name: str) -> "Node":
        """Build a synthetic Identifier node."""
        return cls("Identifier", {"name": name})

    @property
    def name(self) -> Optional[str]:
        """The ``name`` field of Identifier-like nodes, None otherwise."""
        value = self.fields.get("name")
        return value if isinstance(value, str) and value else None


@dataclass
class SyntaxTree:
    """
    The parsed form of one source file.

    Attributes:
        root: The Program node.
        source: The exact text the tree was parsed from.
        source_type: Parse goal that succeeded ('script' or 'module').
        tolerated_errors: Messages of syntax errors recovered in tolerant mode.
    """
    root: Node
    source: str
    source_type: str = "script"
    tolerated_errors: List[str] = field(default_factory=list)


@dataclass
class NameCounter:
    """Monotonically increasing counter backing the fallback names."""
    value: int = 0

    def next(self) -> int:
        current = self.value
        self.value += 1
        return current
