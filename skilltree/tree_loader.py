"""
Skill tree loader: reads a root document and merges its includes.

Included documents are resolved relative to the directory of the document
that names them. Each document is loaded at most once per load session,
keyed on its resolved path, which both breaks include cycles and merges a
document reached through several branches (a diamond) only once.

Merging follows first-seen order:

- columns are appended in the order they are first encountered;
- a column's default value and emoji table are carried over only by the
  include that first introduces the column;
- groups and clusters of an included document are appended after its own
  includes have been flattened into it.
"""

import logging
from pathlib import Path
from typing import Set, Union

from skilltree.errors import LoadError, ParseError, SkillTreeError
from skilltree.tree_model import Doc, SkillTree
from skilltree.tree_parser import parse_string

logger = logging.getLogger(__name__)


def load(path: Union[str, Path]) -> SkillTree:
    """
    Load the skill tree at ``path`` with all of its includes merged.

    Raises:
        LoadError: If the root document or any include cannot be read
        ParseError: If any document is malformed
    """
    root_path = Path(path)
    loaded: Set[Path] = {_session_key(root_path)}
    tree = load_one(root_path, loaded)
    logger.info(
        "Loaded skill tree from %s: %d groups, %d clusters, %d columns (%d documents)",
        root_path,
        len(tree.groups()),
        len(tree.clusters()),
        len(tree.columns()),
        len(loaded),
    )
    return tree


def load_one(path: Path, loaded: Set[Path]) -> SkillTree:
    """Load a single document and merge its includes, tagging errors with ``path``."""
    try:
        return _read_and_merge(path, loaded)
    except SkillTreeError as exc:
        exc.with_context(f"loading skill tree from `{path}`")
        raise


def _session_key(path: Path) -> Path:
    """Resolve ``path`` to the identity used by the loaded-paths set."""
    try:
        return path.resolve()
    except (OSError, ValueError, RuntimeError) as exc:
        error = LoadError(path, str(exc))
        error.with_context(f"loading skill tree from `{path}`")
        raise error from exc


def _read_and_merge(path: Path, loaded: Set[Path]) -> SkillTree:
    logger.debug("Loading skill tree from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"not valid UTF-8: {exc}", source=str(path)) from exc
    except (OSError, ValueError) as exc:
        raise LoadError(path, getattr(exc, "strerror", None) or str(exc)) from exc

    tree = parse_string(text, source=str(path))
    merge_includes(tree, path.parent, loaded)
    return tree


def merge_includes(tree: SkillTree, tree_dir: Path, loaded: Set[Path]) -> None:
    """
    Load every document named in ``tree.doc.include`` and merge it into ``tree``.

    Args:
        tree: Accumulator document, mutated in place
        tree_dir: Directory include paths are relative to
        loaded: Resolved paths already loaded in this session, updated in place
    """
    if tree.doc is None or not tree.doc.include:
        return

    # The include list is snapshotted; tree.doc is mutated while merging.
    for include_path in list(tree.doc.include):
        tree_path = tree_dir / include_path
        key = _session_key(tree_path)
        if key in loaded:
            logger.debug("Skipping include %s: already loaded", tree_path)
            continue
        loaded.add(key)

        included = load_one(tree_path, loaded)
        _merge_tree(tree, included)


def _merge_tree(tree: SkillTree, included: SkillTree) -> None:
    doc = tree.doc if tree.doc is not None else Doc()
    tree.doc = doc

    included_doc = included.doc
    if included_doc is not None:
        for column in included_doc.columns or []:
            if doc.columns is None:
                doc.columns = []
            if column in doc.columns:
                continue
            doc.columns.append(column)

            if included_doc.emoji is not None and column in included_doc.emoji:
                if doc.emoji is None:
                    doc.emoji = {}
                doc.emoji[column] = dict(included_doc.emoji[column])

            if included_doc.defaults is not None and column in included_doc.defaults:
                if doc.defaults is None:
                    doc.defaults = {}
                doc.defaults[column] = included_doc.defaults[column]

    if tree.group is None:
        tree.group = []
    tree.group.extend(included.groups())

    if tree.cluster is None:
        tree.cluster = []
    tree.cluster.extend(included.clusters())
