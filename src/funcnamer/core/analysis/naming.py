from __future__ import annotations

"""
Context-Derived Function Naming.

Derives debug-friendly identifiers for anonymous function expressions from
the node that holds them (a property key or a variable name) and falls back
to a bare counter when the context offers no name.
"""

from typing import Iterable, Optional, Set

from funcnamer.domain.constants import NAME_PREFIX
from funcnamer.domain.syntax_models import NameCounter, Node

# Parents whose function value is already named by the grammar itself
_METHOD_PARENTS = frozenset({"MethodDefinition"})
_ACCESSOR_KINDS = frozenset({"get", "set"})


# -----------------------------------------------------------------------------
# CONTEXT INSPECTION
# -----------------------------------------------------------------------------

def base_name_for(parent: Optional[Node]) -> Optional[str]:
    """
    Derive the base name from the immediate parent of a function expression.

    Args:
        parent: The node whose child is the function, or None at the root.

    Returns:
        Optional[str]: The property key name for Property parents, the
                       variable name for VariableDeclarator parents, None
                       otherwise (including keys and ids without a name).
    """
    if parent is None:
        return None

    if parent.type == "Property":
        key = parent.get("key")
        return key.name if isinstance(key, Node) else None

    if parent.type == "VariableDeclarator":
        target = parent.get("id")
        return target.name if isinstance(target, Node) else None

    return None


def is_grammar_named(parent: Optional[Node]) -> bool:
    """
    Tell whether a function value takes its name from the surrounding syntax.

    Method shorthand, accessors and class methods have no ``function``
    keyword that could carry an identifier.
    """
    if parent is None:
        return False
    if parent.type in _METHOD_PARENTS:
        return True
    if parent.type == "Property":
        return bool(parent.get("method")) or parent.get("kind") in _ACCESSOR_KINDS
    return False


# -----------------------------------------------------------------------------
# NAME GENERATION
# -----------------------------------------------------------------------------

class NameGenerator:
    """
    Produces unique synthetic identifiers for one naming scope.

    Names follow ``ANONYMOUS_FUNC_<base>_<n>`` or ``ANONYMOUS_FUNC_<n>``.
    A candidate that collides with a reserved identifier (one already used
    in the file) is skipped by advancing the counter.
    """

    def __init__(self, counter: Optional[NameCounter] = None, reserved: Iterable[str] = ()):
        self.counter = counter if counter is not None else NameCounter()
        self._reserved: Set[str] = set(reserved)

    def generate(self, base_name: Optional[str] = None) -> str:
        while True:
            n = self.counter.next()
            if base_name:
                candidate = f"{NAME_PREFIX}{base_name}_{n}"
            else:
                candidate = f"{NAME_PREFIX}{n}"
            if candidate not in self._reserved:
                self._reserved.add(candidate)
                return candidate
