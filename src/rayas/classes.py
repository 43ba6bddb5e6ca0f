"""Role-to-class table construction.

A class table holds one precomputed ``class=ROLE`` attribute per role
name, indexed by capture index. It is built once per language and shared
read-only by every render for that language.

Role names are trusted static configuration, so they are copied verbatim:
no escaping, no whitespace normalization, no deduplication.
"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Sequence

ClassTable: TypeAlias = tuple[str, ...]

CLASS_PREFIX = "class="


def names_to_classes(role_names: Sequence[str]) -> ClassTable:
    """Build the class table for an ordered sequence of role names.

    Example:
        >>> names_to_classes(["keyword", "keyword.return"])
        ('class=keyword', 'class=keyword.return')
    """
    return tuple(CLASS_PREFIX + name for name in role_names)
