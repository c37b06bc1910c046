"""Signal extraction: free text -> SignalBundle

Keyword tests are plain substring containment on the lowercased prompt, so
"application" counts as "app" and "bred" counts as "red". That lax matching
is the intended behavior.
"""

from typing import Optional, Sequence
from landing_synth.core.signals import (
    FALLBACK_PRODUCT_NAME,
    ColorScheme,
    SectionFlags,
    SignalBundle,
    ToneFlags,
)


DARK_KEYWORDS = ("dark", "black")
MINIMAL_KEYWORDS = ("minimal", "clean")
SAAS_KEYWORDS = ("saas", "software")
PRODUCT_KEYWORDS = ("product", "app")
AGENCY_KEYWORDS = ("agency", "service")

FEATURE_KEYWORDS = ("feature",)
PRICING_KEYWORDS = ("pricing", "price")
TESTIMONIAL_KEYWORDS = ("testimonial", "review")

# First match wins; dark is checked before any of these
NAMED_COLOR_SCHEMES = (
    ("blue", ColorScheme.BLUE),
    ("green", ColorScheme.GREEN),
    ("purple", ColorScheme.PURPLE),
    ("red", ColorScheme.RED),
)

MIN_NAME_LENGTH = 4
NAME_TRAILING_PUNCTUATION = ".,;:!?"
# Imperative or presentational openers that lead a prompt but never name a product
LEAD_IN_WORDS = frozenset((
    "introducing", "presenting", "meet", "create", "build", "make",
    "design", "generate", "launch", "write",
))


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def extract_tone(lowered: str) -> ToneFlags:
    """Evaluate each tone flag independently against the lowercased prompt"""
    return ToneFlags(
        is_dark=_contains_any(lowered, DARK_KEYWORDS),
        is_minimal=_contains_any(lowered, MINIMAL_KEYWORDS),
        is_saas=_contains_any(lowered, SAAS_KEYWORDS),
        is_product=_contains_any(lowered, PRODUCT_KEYWORDS),
        is_agency=_contains_any(lowered, AGENCY_KEYWORDS),
    )


def select_color_scheme(lowered: str, tone: ToneFlags) -> ColorScheme:
    """Dark first, then the first named color found, else the default scheme"""
    if tone.is_dark:
        return ColorScheme.DARK
    for keyword, scheme in NAMED_COLOR_SCHEMES:
        if keyword in lowered:
            return scheme
    return ColorScheme.DEFAULT


def extract_product_name(text: str) -> str:
    """
    Pick a product name from the original-case prompt.

    The first whitespace-separated token (trailing punctuation removed) that
    is at least MIN_NAME_LENGTH characters long and starts with an uppercase
    letter wins. Lead-in words such as "Introducing" or "Create" are skipped.
    No qualifying token yields FALLBACK_PRODUCT_NAME.

        "Introducing Acme today"      -> "Acme"
        "TaskFlow SaaS landing page"  -> "TaskFlow"
        "just lowercase words"        -> "YourBrand"
    """
    for token in text.split():
        word = token.rstrip(NAME_TRAILING_PUNCTUATION)
        if len(word) < MIN_NAME_LENGTH or not word[0].isupper():
            continue
        if word.lower() in LEAD_IN_WORDS:
            continue
        return word

    return FALLBACK_PRODUCT_NAME


def extract_sections(lowered: str, tone: ToneFlags) -> SectionFlags:
    """Section inclusion flags; the call-to-action is unconditional"""
    return SectionFlags(
        has_features=_contains_any(lowered, FEATURE_KEYWORDS) or tone.is_saas or tone.is_product,
        has_pricing=_contains_any(lowered, PRICING_KEYWORDS),
        has_testimonials=_contains_any(lowered, TESTIMONIAL_KEYWORDS),
        has_cta=True,
    )


def extract(text: Optional[str]) -> SignalBundle:
    """
    Turn a free-text prompt into a SignalBundle.

    Total and deterministic: any string (empty included) maps to a valid
    bundle, and the same text always maps to the same bundle.
    """
    text = text or ""
    lowered = text.lower()

    tone = extract_tone(lowered)
    return SignalBundle(
        tone=tone,
        color_scheme=select_color_scheme(lowered, tone),
        product_name=extract_product_name(text),
        sections=extract_sections(lowered, tone),
    )
