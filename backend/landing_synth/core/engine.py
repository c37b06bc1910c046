"""Prompt -> landing page pipeline: extract, compose, validate"""

import logging
from typing import NamedTuple, Optional
from landing_synth.core.composer import compose
from landing_synth.core.extractor import extract
from landing_synth.core.signals import SignalBundle
from landing_synth.core.validator import validate_document
from landing_synth.models.errors import ApplicationError, ErrorCode

logger = logging.getLogger(__name__)


class GeneratedPage(NamedTuple):
    """A composed document together with the signals it was built from"""
    signals: SignalBundle
    html: str


def build_page(prompt: Optional[str]) -> GeneratedPage:
    """
    Run the full pipeline for one prompt.

    Extraction and composition are total, so a document that fails the
    structure check means a defect in the templates; that surfaces as
    GENERATION_FAILED and is not retried.
    """
    signals = extract(prompt)
    logger.debug(f"Extracted signals: {signals.model_dump_json()}")

    html = compose(signals)

    is_valid, errors = validate_document(html)
    if not is_valid:
        logger.error(f"Composed document failed structure check: {errors}")
        raise ApplicationError(
            code=ErrorCode.GENERATION_FAILED,
            message="Failed to generate landing page",
            hint="; ".join(errors),
        )

    logger.info(
        f"Generated landing page for '{signals.product_name}' "
        f"(scheme={signals.color_scheme.value}, "
        f"features={signals.sections.has_features}, "
        f"pricing={signals.sections.has_pricing}, "
        f"testimonials={signals.sections.has_testimonials}, "
        f"{len(html)} chars)"
    )
    return GeneratedPage(signals=signals, html=html)


def generate_landing_page(prompt: Optional[str]) -> str:
    """Generate the HTML document for ``prompt``"""
    return build_page(prompt).html
