"""
Error types raised while loading and checking skill trees.

Every error carries a list of context frames. Frames are prepended as an
error propagates out of nested document loads, so a failure deep in an
include chain reads outermost document first.
"""

from pathlib import Path
from typing import List, Optional, Union


class SkillTreeError(Exception):
    """Base class for all skill tree errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: List[str] = []

    def with_context(self, frame: str) -> "SkillTreeError":
        """Prepend a context frame and return self for re-raising."""
        self.context.insert(0, frame)
        return self

    def __str__(self) -> str:
        if not self.context:
            return self.message
        lines = list(self.context)
        lines.append(f"caused by: {self.message}")
        return "\n".join(lines)


class LoadError(SkillTreeError):
    """A document could not be read from disk."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"cannot read `{path}`: {reason}")
        self.path = Path(path)
        self.reason = reason


class ParseError(SkillTreeError):
    """Document text is not a well-formed skill tree."""

    def __init__(self, message: str, source: Optional[str] = None):
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
        self.source = source


class DependencyError(SkillTreeError):
    """A group requires a group that does not exist."""

    def __init__(self, group: str, dependency: str):
        super().__init__(
            f"the group `{group}` has a dependency on a group `{dependency}` "
            "that does not exist"
        )
        self.group = group
        self.dependency = dependency


class MissingFieldError(SkillTreeError):
    """A required item field was accessed but is absent."""

    def __init__(self, field: str):
        super().__init__(f"item is missing required field `{field}`")
        self.field = field


class DuplicateGroupError(SkillTreeError):
    """Two or more groups share the same name."""

    def __init__(self, name: str):
        super().__init__(f"the group name `{name}` is declared more than once")
        self.name = name
