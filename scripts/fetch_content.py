#!/usr/bin/env python3
"""
Fetch posts or pages from a WordPress site:
- list one page of a collection (with total / total pages)
- or print a single item by id
- or print only the total count (HEAD request)

Examples:
  python scripts/fetch_content.py https://wordpress.org/news posts --offset 3 --order asc
  python scripts/fetch_content.py https://wordpress.org pages --id 257
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()

from wpcontent import Collection, Item, WordPressClient
from wpcontent.utils.config_loader import apply_env_overrides, load_client_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def print_item(item: Item, full: bool = False) -> None:
    print(f"[{item.id}] {item.title}")
    print(f"    link={item.link}")
    print(f"    created={item.created_at} modified={item.modified_at}")
    if full:
        print()
        print(item.content)
    else:
        excerpt = item.excerpt.replace("\n", " ")
        print(f"    excerpt={excerpt[:200]}")
    print()


async def run(args: argparse.Namespace) -> int:
    cfg = apply_env_overrides(load_client_config(args.config))
    collection = Collection(args.collection)

    options = {}
    if args.order:
        options["order"] = args.order
    if args.orderby:
        options["orderby"] = args.orderby
    if args.search:
        options["search"] = args.search

    async with WordPressClient(args.base_url, config=cfg) as client:
        if args.id is not None:
            item = await client.fetch_item(args.id, collection)
            print_item(item, full=True)
            return 0

        if args.count:
            total = await client.count_items(collection, **options)
            print(f"total={total}")
            return 0

        response = await client.fetch_collection(
            collection, page_size=args.page_size, offset=args.offset, **options
        )
        print(f"total={response.total} total_pages={response.total_pages} page_size={response.page_size}\n")
        for item in response.items:
            print_item(item)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Read posts/pages from a WordPress REST API")
    parser.add_argument("base_url", help="URL of the WordPress installation")
    parser.add_argument("collection", choices=[c.value for c in Collection])
    parser.add_argument("--id", type=int, default=None, help="Fetch a single item by id")
    parser.add_argument("--count", action="store_true", help="Only print the total item count")
    parser.add_argument("--page-size", type=int, default=None)
    parser.add_argument("--offset", type=int, default=0)
    parser.add_argument("--order", choices=["asc", "desc"], default=None)
    parser.add_argument("--orderby", default=None)
    parser.add_argument("--search", default=None)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to client config YAML file (default: config/client_config.yml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log outgoing URLs")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
