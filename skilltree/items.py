"""Accessors for item mappings."""

from typing import Optional

from skilltree.errors import MissingFieldError
from skilltree.tree_model import Item, SkillTree


def label(item: Item) -> str:
    """Return the mandatory ``label`` of an item."""
    try:
        return item["label"]
    except KeyError:
        raise MissingFieldError("label") from None


def href(item: Item) -> Optional[str]:
    return item.get("href")


def column_value(item: Item, tree: SkillTree, column: str) -> str:
    """
    Return the value an item shows in ``column``.

    Falls back to the tree-wide default for the column, then to the empty
    string.
    """
    if column in item:
        return item[column]
    default = tree.default_for(column)
    if default is not None:
        return default
    return ""
