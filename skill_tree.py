#!/usr/bin/env python3

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from skilltree import SkillTree, SkillTreeError, __version__, load, validate


def write_summary(tree: SkillTree, output_stream: TextIO) -> None:
    """Write a short human-readable description of a merged tree."""
    groups = tree.groups()
    output_stream.write(f"Groups: {len(groups)}\n")
    output_stream.write(f"Clusters: {len(tree.clusters())}\n")
    columns = tree.columns()
    output_stream.write(f"Columns: {', '.join(columns) if columns else '(none)'}\n")
    for group in groups:
        status = group.status.value if group.status is not None else "-"
        output_stream.write(
            f"  {group.name} [{status}] {len(group.items)} items"
            f" requires: {', '.join(group.dependencies()) or '-'}\n"
        )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Load a skill tree, merge its includes and check its dependencies."
    )
    parser.add_argument("tree_file", nargs="?", help="Path to the root skill tree TOML file")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the merged skill tree as pretty-printed JSON",
    )
    parser.add_argument(
        "--strict-names",
        action="store_true",
        help="Treat duplicate group names as an error",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write output to this file (UTF-8, LF line endings). If omitted, output goes to stdout.",
    )

    args = parser.parse_args(argv)

    if args.version:
        print(f"skill-tree: {__version__}")
        return 0

    if not args.tree_file:
        parser.error("the following arguments are required: tree_file")

    logging.basicConfig(
        level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s"
    )
    logger = logging.getLogger("skill_tree")

    try:
        tree = load(args.tree_file)
        logger.info("Validating skill tree")
        validate(tree, strict_names=args.strict_names)
    except SkillTreeError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    output_stream = None
    if args.output:
        try:
            output_stream = open(args.output, "w", encoding="utf-8", newline="\n")
        except OSError as exc:
            sys.stderr.write(f"error: cannot write `{args.output}`: {exc.strerror or exc}\n")
            return 1
    else:
        output_stream = sys.stdout

    try:
        if args.json:
            json.dump(tree.model_dump(mode="json", exclude_none=True), output_stream, indent=2)
            output_stream.write("\n")
        else:
            write_summary(tree, output_stream)
    finally:
        if args.output and output_stream is not sys.stdout:
            output_stream.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
