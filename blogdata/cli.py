"""Command line tool for inspecting a blog data directory.

Usage:
    blogdata init
    blogdata list posts
    blogdata count tags
    blogdata show categories <id>
    blogdata delete posts <id>
    blogdata --data-path ./data -v list categories
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from blogdata.config import load_settings, ensure_directories
from blogdata.exceptions import BlogDataError
from blogdata.repositories.blog_repository import BlogRepository

COLLECTIONS = ["posts", "categories", "tags"]


def _describe(entity) -> str:
    """One-line summary of an entity for listings."""
    label = getattr(entity, "title", None) or getattr(entity, "name", "")
    return f"{entity.id}  {label}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blogdata",
        description="Inspect and maintain a JSON blog data directory",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON settings file")
    parser.add_argument("--data-path", default=None, help="Override the data root directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create the data directory and entity folders")

    list_parser = subparsers.add_parser("list", help="List entities of one type")
    list_parser.add_argument("collection", choices=COLLECTIONS)

    count_parser = subparsers.add_parser("count", help="Count entities of one type")
    count_parser.add_argument("collection", choices=COLLECTIONS)

    show_parser = subparsers.add_parser("show", help="Print one entity as JSON")
    show_parser.add_argument("collection", choices=COLLECTIONS)
    show_parser.add_argument("id")

    delete_parser = subparsers.add_parser("delete", help="Delete one entity")
    delete_parser.add_argument("collection", choices=COLLECTIONS)
    delete_parser.add_argument("id")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
    except BlogDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.data_path:
        settings = settings.model_copy(update={"data_path": args.data_path})

    if args.command == "init":
        ensure_directories(settings)
        print(f"Initialized: {settings.root}")
        return 0

    repo = BlogRepository(settings).collection(args.collection)

    if args.command == "list":
        for entity in repo.list():
            print(_describe(entity))
    elif args.command == "count":
        print(repo.count())
    elif args.command == "show":
        entity = repo.get(args.id)
        if entity is None:
            print(f"Not found: {args.id}", file=sys.stderr)
            return 1
        print(entity.to_json())
    elif args.command == "delete":
        repo.delete(args.id)
        print(f"Deleted: {args.id}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
