"""
==============================================================================
Catalog Consistency Checker
==============================================================================

Verifies that a bundled page carries the same products as the source JSON.

Box codes present in the source but absent from the page are errors; box
codes only present in the page are reported as warnings.

==============================================================================
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

from pydantic import BaseModel, Field

from glassfit.catalog.loader import read_json
from glassfit.core.exceptions import BundleError


# Module logger
logger = logging.getLogger(__name__)


PathLike = Union[str, Path]

# Stops at the first "];", which closes the top-level array
BUNDLED_PRODUCTS = re.compile(r"const uniproProducts\s*=\s*(\[.*?\]);", re.DOTALL)


class ConsistencyReport(BaseModel):
    """Box-code comparison between a source and a target product table."""

    source_count: int = Field(ge=0)
    target_count: int = Field(ge=0)
    missing_in_target: List[str] = Field(default_factory=list)
    extra_in_target: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every source product is present in the target."""
        return not self.missing_in_target


def _box_codes(products: Iterable[Mapping[str, Any]]) -> List[str]:
    """Unique box codes in first-seen order."""
    return list(dict.fromkeys(product["boxCode"] for product in products))


def compare_box_codes(
    source: List[Mapping[str, Any]],
    target: List[Mapping[str, Any]],
) -> ConsistencyReport:
    """
    Compute the symmetric difference of box codes.

    Args:
        source: Source-of-truth product records
        target: Product records found in the bundled copy

    Returns:
        ConsistencyReport with both difference lists in first-seen order
    """
    source_codes = _box_codes(source)
    target_codes = _box_codes(target)
    source_set = set(source_codes)
    target_set = set(target_codes)

    return ConsistencyReport(
        source_count=len(source),
        target_count=len(target),
        missing_in_target=[code for code in source_codes if code not in target_set],
        extra_in_target=[code for code in target_codes if code not in source_set],
    )


def extract_bundled_products(html: str) -> List[Mapping[str, Any]]:
    """
    Parse the ``const uniproProducts = [...]`` literal out of a page.

    Raises:
        BundleError: If the literal is missing or is not plain JSON
    """
    match = BUNDLED_PRODUCTS.search(html)
    if not match:
        raise BundleError("Could not find 'const uniproProducts = [...]' in page")

    try:
        return json.loads(match.group(1))
    except json.JSONDecodeError as e:
        snippet = match.group(1)[:100]
        raise BundleError(
            f"Embedded product array is not valid JSON ({e}); snippet: {snippet}..."
        ) from e


def check_products(products_file: PathLike, page_file: PathLike) -> ConsistencyReport:
    """
    Compare the product JSON file with the products embedded in a page.

    The report is also logged: missing codes at ERROR, extra codes at WARNING.
    """
    source = read_json(products_file)
    html = Path(page_file).read_text(encoding="utf-8")
    target = extract_bundled_products(html)

    report = compare_box_codes(source, target)

    logger.info(f"Source JSON products count: {report.source_count}")
    logger.info(f"Target page products count: {report.target_count}")

    for code in report.missing_in_target:
        logger.error(f"Missing in page: {code!r}")
    for code in report.extra_in_target:
        logger.warning(f"Extra in page: {code!r}")

    if report.ok:
        logger.info("Data is synchronized")
    else:
        logger.error(f"{len(report.missing_in_target)} box codes missing from page")

    return report
