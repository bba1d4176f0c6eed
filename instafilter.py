#!/usr/bin/env python3
"""
Instafilter — Photo Filter Engine
CLI entry point. Also importable as a library.

Usage:
    python instafilter.py list-filters
    python instafilter.py info "blue 50%"
    python instafilter.py search dots
    python instafilter.py apply photo.png --filter "blue 50%" --filter "dark dots"
"""

import sys
import os
import argparse

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.image_io import load_image
from core.processor import FilterProcessor
from core.safety import check_image_file
from core.statistics import average_channels
from filters import (
    FILTERS, CATEGORIES,
    list_filters, list_categories, search_filters, normalize_name,
)

__version__ = "0.1.0"


def _did_you_mean(name: str) -> str:
    matches = [n for n in FILTERS if name in n]
    if matches:
        return f"Unknown filter: {name}. Did you mean: {', '.join(matches)}?"
    return f"Unknown filter: {name}. Use 'instafilter list-filters' to see all."


def _format_averages(averages) -> str:
    return f"R={averages.red} G={averages.green} B={averages.blue}"


def cmd_list_filters(args):
    """List all available filters, grouped by category."""
    category_filter = getattr(args, "category", None)
    compact = getattr(args, "compact", False)

    categories = [category_filter] if category_filter else list_categories()
    total = 0
    for cat_key in categories:
        entries = list_filters(category=cat_key)
        if not entries:
            continue
        total += len(entries)
        print(f"\n  {CATEGORIES.get(cat_key, cat_key.upper())} ({len(entries)})")
        print(f"  {'-' * 50}")
        for e in entries:
            print(f"    {e['name']:17s} {e['description']}")
            if not compact:
                params_str = ", ".join(f"{k}={v}" for k, v in e["params"].items())
                print(f"    {'':17s} Params: {params_str}")

    print(f"\n  Total: {total} filters")
    if not category_filter:
        print(f"  Use --category <name> to filter. Use --compact for names only.")
    print()


def cmd_info(args):
    """Show detailed info about a single filter."""
    name = normalize_name(args.filter_name)
    if name not in FILTERS:
        print(_did_you_mean(name))
        return

    entry = FILTERS[name]
    cat = entry["category"]
    print(f"\n  {name}")
    print(f"  {'-' * 40}")
    print(f"  Category:    {CATEGORIES.get(cat, cat.upper())}")
    print(f"  Kind:        {entry['kind'].value}")
    print(f"  Description: {entry['description']}")
    print(f"\n  Parameters:")
    for k, v in entry["params"].items():
        print(f"    {k:20s} = {v}")
    print(f"\n  Example:")
    print(f"    instafilter apply photo.png --filter \"{name}\"")
    print()


def cmd_search(args):
    """Search filters by label or description."""
    results = search_filters(args.query)
    if not results:
        print(f"No filters matching '{args.query}'.")
        return
    print(f"\n  Results for '{args.query}' ({len(results)} found):")
    print(f"  {'-' * 50}")
    for e in results:
        cat = CATEGORIES.get(e["category"], e["category"].upper())
        print(f"    {e['name']:17s} [{cat:8s}] {e['description']}")
    print()


def cmd_apply(args):
    """Run a filter chain over an image and report what changed."""
    info = check_image_file(args.image)
    buffer = load_image(info["path"])
    print(f"Loaded {args.image}: {buffer.width}x{buffer.height} ({info['size_mb']:.1f}MB)")

    before = average_channels(buffer)
    processor = FilterProcessor(buffer)
    skipped = processor.run_filters(args.filter)

    for message in skipped:
        print(f"  Warning: {message}")
    if processor.applied:
        print(f"Applied: {', '.join(processor.applied)}")
    else:
        print("No filters applied.")
    print(f"  Averages before: {_format_averages(before)}")
    print(f"  Averages after:  {_format_averages(average_channels(processor.buffer))}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="instafilter",
        description="Instafilter — named photo filters for RGBA images",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    # list-filters
    p = sub.add_parser("list-filters", help="List all available filters")
    p.add_argument("--category", choices=list_categories(), help="Filter by category")
    p.add_argument("--compact", action="store_true", help="Compact view (names only)")

    # info
    p = sub.add_parser("info", help="Show detailed info about a filter")
    p.add_argument("filter_name", help="Filter label, e.g. 'blue 50%%'")

    # search
    p = sub.add_parser("search", help="Search filters by label or description")
    p.add_argument("query", help="Search term")

    # apply
    p = sub.add_parser("apply", help="Apply filters to an image (nothing is written to disk)")
    p.add_argument("image", help="Path to source image")
    p.add_argument("--filter", action="append", required=True,
                   help="Filter label; repeat to chain filters in order")

    args = parser.parse_args(argv)

    commands = {
        "list-filters": cmd_list_filters,
        "info": cmd_info,
        "search": cmd_search,
        "apply": cmd_apply,
    }

    if args.command in commands:
        try:
            commands[args.command](args)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
