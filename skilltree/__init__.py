"""
Skill tree package - loading, merging and checking skill tree documents.

- tree_model: Typed document model and tree-level accessors
- items: Item accessors (label, href, column value with default fallback)
- tree_parser: TOML text to model
- tree_loader: Recursive include resolution and schema merging
- tree_validator: Dependency edge checks
- errors: Error kinds with context chaining
"""

from .errors import (
    DependencyError,
    DuplicateGroupError,
    LoadError,
    MissingFieldError,
    ParseError,
    SkillTreeError,
)
from .items import column_value, href, label
from .tree_loader import load, load_one, merge_includes
from .tree_model import Cluster, Doc, Graphviz, Group, Item, SkillTree, Status
from .tree_parser import parse_string
from .tree_validator import find_duplicate_groups, validate, validate_group, validate_item

__version__ = "0.1.0"

__all__ = [
    "Cluster",
    "DependencyError",
    "Doc",
    "DuplicateGroupError",
    "Graphviz",
    "Group",
    "Item",
    "LoadError",
    "MissingFieldError",
    "ParseError",
    "SkillTree",
    "SkillTreeError",
    "Status",
    "column_value",
    "find_duplicate_groups",
    "href",
    "label",
    "load",
    "load_one",
    "merge_includes",
    "parse_string",
    "validate",
    "validate_group",
    "validate_item",
]
