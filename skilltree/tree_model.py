"""
Typed model of a skill tree document.

A SkillTree holds groups (each owning a list of items), clusters used for
visual grouping, an optional layout hint block and an optional ``doc``
metadata block that declares columns, column defaults, per-column emoji
translation tables and the list of included documents.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

# An item is an open mapping from column name to value. "label" is required
# by convention and enforced at access time (see skilltree.items).
Item = Dict[str, str]

# Raw value -> display value, per column.
EmojiMap = Dict[str, str]


class Status(str, Enum):
    """Work status of a group."""

    # Can't work on it now
    Blocked = "Blocked"
    # Would like to work on it, but need someone
    Unassigned = "Unassigned"
    # People are actively working on it
    Assigned = "Assigned"
    # This is done!
    Complete = "Complete"


class _TreeNode(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Graphviz(_TreeNode):
    """Diagram layout hints."""

    rankdir: Optional[str] = None


class Doc(_TreeNode):
    """Document-level schema metadata."""

    columns: Optional[List[str]] = None
    defaults: Optional[Dict[str, str]] = None
    emoji: Optional[Dict[str, EmojiMap]] = None
    include: Optional[List[str]] = None


class Cluster(_TreeNode):
    """Named visual container for groups."""

    name: str
    label: str
    color: Optional[str] = None
    style: Optional[str] = None


class Group(_TreeNode):
    """A node of the skill tree."""

    name: str
    cluster: Optional[str] = None
    label: Optional[str] = None
    requires: Optional[List[str]] = None
    description: Optional[List[str]] = None
    items: List[Item]
    width: Optional[float] = None
    status: Optional[Status] = None
    href: Optional[str] = None
    header_color: Optional[str] = None
    description_color: Optional[str] = None

    def dependencies(self) -> List[str]:
        return list(self.requires or [])

    def display_label(self) -> str:
        return self.label if self.label is not None else self.name


class SkillTree(_TreeNode):
    """
    Root aggregate of a skill tree document.

    Mutated in place while includes are merged; callers treat the result of
    a load as read-only.
    """

    group: Optional[List[Group]] = None
    cluster: Optional[List[Cluster]] = None
    graphviz: Optional[Graphviz] = None
    doc: Optional[Doc] = None

    def groups(self) -> List[Group]:
        return list(self.group or [])

    def clusters(self) -> List[Cluster]:
        return list(self.cluster or [])

    def group_named(self, name: str) -> Optional[Group]:
        """Return the first group called ``name``, if any."""
        for group in self.groups():
            if group.name == name:
                return group
        return None

    def columns(self) -> List[str]:
        """Return the expected column titles for each item (excluding the label)."""
        if self.doc is not None and self.doc.columns is not None:
            return list(self.doc.columns)
        return []

    def default_for(self, column: str) -> Optional[str]:
        if self.doc is not None and self.doc.defaults is not None:
            return self.doc.defaults.get(column)
        return None

    def emoji(self, column: str, value: str) -> str:
        """Translate ``value`` through the emoji table of ``column``, returning it unchanged if not found."""
        if self.doc is not None and self.doc.emoji is not None:
            emoji_map = self.doc.emoji.get(column)
            if emoji_map is not None and value in emoji_map:
                return emoji_map[value]
        return value

    def rankdir(self) -> Optional[str]:
        if self.graphviz is None:
            return None
        return self.graphviz.rankdir
