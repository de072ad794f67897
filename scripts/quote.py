#!/usr/bin/env python
"""
Print a ticket quote for one museum.

Usage:
    python scripts/quote.py amnh --adult 2 --child 1
    python scripts/quote.py --list
"""
import argparse
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from museum_tickets.engine import PricingEngine, Category
from museum_tickets.engine.formatting import format_currency, format_price_label


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NYC museum ticket quote")
    parser.add_argument('museum', nargs='?', help="Museum id, e.g. met or amnh")
    parser.add_argument('--list', action='store_true', help="List museums and prices")
    parser.add_argument('--trace', action='store_true', help="Show calculation details")
    for category in Category:
        parser.add_argument(f'--{category.value}', default="0", metavar='N',
                            help=f"Number of {category.value} visitors")
    return parser


def print_catalog(engine: PricingEngine):
    print(f"{'ID':<12}{'Museum':<38}" + "".join(f"{c.value.capitalize():>9}" for c in Category))
    for museum in engine.catalog:
        prices = "".join(f"{format_price_label(museum.prices[c]):>9}" for c in Category)
        print(f"{museum.id:<12}{museum.name:<38}{prices}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    engine = PricingEngine()

    if args.list or not args.museum:
        print_catalog(engine)
        return 0

    museum = engine.select_museum(args.museum)
    if museum is None:
        print(f"ERROR: Unknown museum '{args.museum}'. Known: {', '.join(engine.catalog.ids)}")
        return 1

    for category in Category:
        engine.set_visitor_count(category, getattr(args, category.value))

    summary = engine.summary()
    print(f"Museum: {museum.name} ({museum.location})")
    if summary is None:
        print("No visitors entered.")
        return 0

    print(f"Total Visitors: {summary.total_visitors}")
    print("-" * 40)
    for line in summary.lines:
        print(f"{line.label.capitalize():<28}{format_currency(line.subtotal):>12}")
    print("-" * 40)
    print(f"{'Total Cost:':<28}{format_currency(summary.total):>12}")

    if args.trace:
        print()
        print(summary.get_trace_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
