"""
==============================================================================
Offline Page Bundler
==============================================================================

Builds a single self-contained search page by embedding both catalog tables
into the page template.

The template loads its data with two external scripts followed by one
inline bootstrap script:

    <script src="data/mobileModels.js"></script>
    <script src="data/uniproProducts.js"></script>
    <script> ... </script>

That block is replaced by one inline script that defines ``mobileModels``
and ``uniproProducts`` as constants and fills the ``mc``/``pc`` counters.

==============================================================================
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Sequence, Tuple, Union

from glassfit.catalog.loader import read_json
from glassfit.core.exceptions import BundleError


# Module logger
logger = logging.getLogger(__name__)


PathLike = Union[str, Path]

DATA_LOADING_BLOCK = re.compile(
    r'<script src="data/mobileModels\.js"></script>\s*'
    r'<script src="data/uniproProducts\.js"></script>\s*'
    r'<script>.*?</script>',
    re.DOTALL,
)

EMBEDDED_DATA_TEMPLATE = """
    <script>
        // Embedded data - no external files needed
        const mobileModels = {models};
        const uniproProducts = {products};

        // Initialize stats
        document.getElementById('mc').textContent = mobileModels.length;
        document.getElementById('pc').textContent = uniproProducts.length;
    </script>"""


def _to_js_literal(data: Any) -> str:
    """Compact JSON, which is also a valid JavaScript literal."""
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def render_embedded_data(models: Sequence[Any], products: Sequence[Any]) -> str:
    """Render the inline script holding both tables."""
    return EMBEDDED_DATA_TEMPLATE.format(
        models=_to_js_literal(list(models)),
        products=_to_js_literal(list(products)),
    )


def bundle_page(template: str, models: Sequence[Any], products: Sequence[Any]) -> str:
    """
    Embed the catalog tables into a page template.

    Args:
        template: HTML of the multi-file search page
        models: Mobile model names
        products: Raw product records (JSON-serializable)

    Returns:
        HTML of the standalone page

    Raises:
        BundleError: If the template has no data-loading block
    """
    embedded = render_embedded_data(models, products)

    # Callable replacement keeps backslashes in the data literal intact
    output, count = DATA_LOADING_BLOCK.subn(lambda _: embedded, template, count=1)
    if count == 0:
        raise BundleError("Template does not contain the data-loading script block")

    return output


def build_offline_page(
    models_file: PathLike,
    products_file: PathLike,
    template_file: PathLike,
    output_file: PathLike,
) -> Tuple[int, int]:
    """
    Write the standalone page from the catalog files and template.

    Returns:
        (model count, product count) embedded in the page
    """
    models = read_json(models_file)
    products = read_json(products_file)
    template = Path(template_file).read_text(encoding="utf-8")

    output = bundle_page(template, models, products)
    Path(output_file).write_text(output, encoding="utf-8")

    logger.info(f"✅ Created {output_file}")
    logger.info(f"📊 Loaded {len(models)} models and {len(products)} products")
    return len(models), len(products)
