"""Document composition: SignalBundle -> HTML document

Body regions always come out in the same order:
nav -> hero -> [features] -> [pricing] -> [testimonials] -> [cta] -> footer.
A region that is switched off is left out entirely, together with its nav link.
"""

from typing import List, Tuple
from landing_synth.core import templates
from landing_synth.core.signals import SectionFlags, SignalBundle, ToneFlags
from landing_synth.core.templates import HeroCopy
from landing_synth.utils.sanitization import escape_html


def select_hero_copy(tone: ToneFlags, name: str) -> HeroCopy:
    """SaaS, then product, then agency, then the generic welcome. First match wins."""
    if tone.is_saas:
        return templates.SAAS_HERO
    if tone.is_product:
        return templates.PRODUCT_HERO
    if tone.is_agency:
        return templates.AGENCY_HERO
    return HeroCopy(templates.GENERIC_HERO_HEADLINE.format(name=name), templates.GENERIC_HERO_BODY)


def select_nav_links(sections: SectionFlags) -> Tuple[Tuple[str, str], ...]:
    """Nav links for the sections that are actually emitted"""
    links: List[Tuple[str, str]] = []
    if sections.has_features:
        links.append(("features", "Features"))
    if sections.has_pricing:
        links.append(("pricing", "Pricing"))
    if sections.has_testimonials:
        links.append(("testimonials", "Testimonials"))
    if sections.has_cta:
        links.append(("contact", "Contact"))
    return tuple(links)


def select_sections(sections: SectionFlags) -> Tuple[str, ...]:
    """Optional body regions in document order"""
    regions: List[str] = []
    if sections.has_features:
        regions.append(templates.render_features())
    if sections.has_pricing:
        regions.append(templates.render_pricing())
    if sections.has_testimonials:
        regions.append(templates.render_testimonials())
    if sections.has_cta:
        regions.append(templates.render_cta())
    return tuple(regions)


def compose(bundle: SignalBundle) -> str:
    """
    Render a complete, self-contained HTML document for ``bundle``.

    Pure and deterministic: the same bundle always yields the same string.
    The product name is escaped once and reused for the title, logo,
    fallback headline and footer.
    """
    name = escape_html(bundle.product_name)
    stylesheet = templates.render_stylesheet(
        bundle.palette,
        dark=bundle.color_scheme.is_dark,
        minimal=bundle.tone.is_minimal,
    )
    head = templates.render_head(f"{name} - Landing Page", stylesheet)

    hero = select_hero_copy(bundle.tone, name)
    regions = (
        templates.render_nav(name, select_nav_links(bundle.sections)),
        templates.render_hero(hero.headline, hero.body),
        *select_sections(bundle.sections),
        templates.render_footer(name),
    )
    return templates.render_document(head, regions)
