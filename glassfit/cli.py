"""
Glass Fitment Finder - Command Line

Usage:
    # Start the API server:
    glassfit serve

    # Products that fit a device:
    glassfit find "iPhone 13"

    # Keyword search over models and products:
    glassfit search "13 pro"

    # Candidate iPhones for a 390x844 screen at 3x:
    glassfit detect 390 844 --ratio 3

    # Build the standalone offline page:
    glassfit bundle --template offline-search.html --output offline-search-standalone.html

    # Verify the standalone page against the product JSON (exit 1 on mismatch):
    glassfit check --page offline-search-standalone.html
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from glassfit.catalog.loader import load_catalog
from glassfit.config import get_settings
from glassfit.core.exceptions import BundleError, CatalogLoadError
from glassfit.devices import detect_ios_device, resolution_key
from glassfit.matching.engine import MatchingEngine
from glassfit.tools.bundler import build_offline_page
from glassfit.tools.checker import check_products


logger = logging.getLogger("glassfit")


def _engine(args: argparse.Namespace) -> MatchingEngine:
    settings = get_settings()
    store = load_catalog(args.models, args.products)
    return MatchingEngine(
        store,
        default_category=settings.default_category,
        search_mobile_limit=settings.search_mobile_limit,
    )


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "glassfit.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=settings.debug,
    )
    return 0


def cmd_find(args: argparse.Namespace) -> int:
    matches = _engine(args).find_products_for_mobile(args.model)
    _print_json([m.to_dict() for m in matches])
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    result = _engine(args).search(args.keyword)
    _print_json(result.to_dict())
    return 0


def cmd_detect(args: argparse.Namespace) -> int:
    print(f"Resolution: {resolution_key(args.width, args.height, args.ratio)}")
    for model in detect_ios_device(args.width, args.height, args.ratio):
        print(f"  {model}")
    return 0


def cmd_bundle(args: argparse.Namespace) -> int:
    models, products = build_offline_page(
        args.models, args.products, args.template, args.output
    )
    print(f"Created {args.output} ({models} models, {products} products)")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    report = check_products(args.products, args.page)

    print("-" * 51)
    print(f"Source JSON products count: {report.source_count}")
    print(f"Target page products count: {report.target_count}")
    print("-" * 51)

    if report.missing_in_target:
        print(f"\nMISSING {len(report.missing_in_target)} box codes in page:")
        for code in report.missing_in_target:
            print(f' - "{code}"')
    else:
        print("\nAll products from JSON are present in the page.")

    if report.extra_in_target:
        print(f"\nFOUND {len(report.extra_in_target)} extra box codes in page:")
        for code in report.extra_in_target:
            print(f' - "{code}"')

    print("-" * 51)
    print("SUCCESS: Data is synchronized." if report.ok else "FAILURE: Data is not matching.")
    return 0 if report.ok else 1


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="glassfit",
        description="Find the protective glass that fits a mobile device.",
    )
    parser.add_argument("--models", default=settings.models_file,
                        help="Mobile model list JSON (default: %(default)s)")
    parser.add_argument("--products", default=settings.products_file,
                        help="Product catalog JSON (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=cmd_serve)

    find = sub.add_parser("find", help="Products that fit a mobile model")
    find.add_argument("model")
    find.set_defaults(func=cmd_find)

    search = sub.add_parser("search", help="Keyword search over models and products")
    search.add_argument("keyword")
    search.set_defaults(func=cmd_search)

    detect = sub.add_parser("detect", help="Candidate iPhones for a screen size")
    detect.add_argument("width", type=float)
    detect.add_argument("height", type=float)
    detect.add_argument("--ratio", type=float, default=1.0, help="Device pixel ratio")
    detect.set_defaults(func=cmd_detect)

    bundle = sub.add_parser("bundle", help="Build the standalone offline page")
    bundle.add_argument("--template", default="offline-search.html")
    bundle.add_argument("--output", default="offline-search-standalone.html")
    bundle.set_defaults(func=cmd_bundle)

    check = sub.add_parser("check", help="Verify a bundled page against the product JSON")
    check.add_argument("--page", default="offline-search-standalone.html")
    check.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        return args.func(args)
    except (CatalogLoadError, BundleError, OSError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
