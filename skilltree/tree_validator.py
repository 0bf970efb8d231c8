"""
Skill tree validator.

Checks referential integrity of a merged tree: every name a group requires
must be the name of a group. Validation stops at the first problem found,
walking groups in document order and each group's dependencies in declared
order.
"""

import logging
from collections import Counter
from typing import List

from skilltree.errors import DependencyError, DuplicateGroupError
from skilltree.tree_model import Group, Item, SkillTree

logger = logging.getLogger(__name__)


def find_duplicate_groups(tree: SkillTree) -> List[str]:
    """Return group names declared more than once, in first-seen order."""
    counts = Counter(group.name for group in tree.groups())
    duplicates = []
    for group in tree.groups():
        if counts[group.name] > 1 and group.name not in duplicates:
            duplicates.append(group.name)
    return duplicates


def validate(tree: SkillTree, *, strict_names: bool = False) -> None:
    """
    Validate a merged skill tree.

    Duplicate group names only produce a warning (lookups resolve to the
    first group of that name) unless ``strict_names`` is set.

    Raises:
        DuplicateGroupError: If ``strict_names`` and a group name repeats
        DependencyError: If a group requires a group that does not exist
    """
    for name in find_duplicate_groups(tree):
        if strict_names:
            raise DuplicateGroupError(name)
        logger.warning("Group `%s` is declared more than once; the first one wins", name)

    for group in tree.groups():
        validate_group(group, tree)


def validate_group(group: Group, tree: SkillTree) -> None:
    for group_name in group.dependencies():
        if tree.group_named(group_name) is None:
            raise DependencyError(group.name, group_name)

    for item in group.items:
        validate_item(item)


def validate_item(item: Item) -> None:
    """Item-level checks; items are open mappings, so nothing is rejected yet."""
