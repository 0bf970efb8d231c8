"""
Skill tree parser: converts TOML text into a SkillTree model.

Parsing is pure: no file or network access happens here. Unknown keys are
ignored so that newer documents still load. Item contents are not checked
beyond being string-valued; required item fields are enforced lazily by the
accessors in skilltree.items.
"""

import tomllib
from typing import Optional

from pydantic import ValidationError

from skilltree.errors import ParseError
from skilltree.tree_model import SkillTree


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


def parse_string(text: str, *, source: Optional[str] = None) -> SkillTree:
    """
    Parse skill tree text.

    Args:
        text: TOML document text
        source: Optional label (usually the file path) used in error messages

    Returns:
        The parsed SkillTree, with includes left unresolved

    Raises:
        ParseError: If the text is not valid TOML or does not have the shape
            of a skill tree
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ParseError(f"invalid TOML: {exc}", source=source) from exc

    try:
        return SkillTree.model_validate(data)
    except ValidationError as exc:
        raise ParseError(
            f"invalid skill tree: {_describe_validation_error(exc)}", source=source
        ) from exc
