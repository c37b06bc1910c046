"""
Tests for the structure validator
"""
import pytest

from landing_synth.core.composer import compose
from landing_synth.core.extractor import extract
from landing_synth.core.validator import validate_document


GOOD_DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Test</title>
    <style>body { color: red; }</style>
</head>
<body>
    <nav><a href="#pricing">Pricing</a><a href="#">Top</a></nav>
    <section id="pricing">Plans</section>
</body>
</html>"""


def test_good_document_passes():
    """A minimal complete document is valid"""
    is_valid, errors = validate_document(GOOD_DOCUMENT)
    assert is_valid, f"Should be valid! Errors: {errors}"
    assert errors == []


@pytest.mark.parametrize("html", ["", "   ", None])
def test_empty_document_fails(html):
    is_valid, errors = validate_document(html)
    assert not is_valid
    assert errors == ["Document is empty"]


def test_missing_doctype_flagged():
    is_valid, errors = validate_document(GOOD_DOCUMENT.replace("<!DOCTYPE html>", ""))
    assert not is_valid
    assert any("DOCTYPE" in error for error in errors)


def test_duplicate_body_flagged():
    html = GOOD_DOCUMENT.replace("</body>", "</body><body></body>")
    is_valid, errors = validate_document(html)
    assert not is_valid
    assert "Expected exactly one <body>, found 2" in errors


def test_missing_style_flagged():
    html = GOOD_DOCUMENT.replace("<style>body { color: red; }</style>", "")
    is_valid, errors = validate_document(html)
    assert not is_valid
    assert "HTML missing inline <style> in <head>" in errors


def test_broken_anchor_flagged():
    """A nav link to an omitted section is a broken anchor"""
    html = GOOD_DOCUMENT.replace('<section id="pricing">Plans</section>', "")
    is_valid, errors = validate_document(html)
    assert not is_valid
    assert errors == ["Broken in-page link: #pricing"]


@pytest.mark.parametrize("prompt", [
    "",
    "A minimal landing page with pricing",
    "Introducing Acme, a dark SaaS product with features, pricing and testimonials",
    "agency with reviews in purple",
    "weird <b>input</b> & \"quotes\" for Café™ \U0001F680",
])
def test_every_composed_document_passes(prompt):
    is_valid, errors = validate_document(compose(extract(prompt)))
    assert is_valid, f"Should be valid! Errors: {errors}"
