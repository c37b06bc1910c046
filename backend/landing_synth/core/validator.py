"""
Structure Validator - well-formedness checks for composed documents

CHECKS:
  ✓ Non-empty document starting with a DOCTYPE
  ✓ Exactly one <html>, <head>, <body> and <title>
  ✓ An inline <style> block in the head
  ✓ Every in-page link (href="#id") points at an element that exists

DOES NOT CHECK:
  ✗ Schema/DTD validity
  ✗ CSS correctness
  ✗ Accessibility or content quality

Runs without network access; never raises.
"""
from typing import List, Tuple
from bs4 import BeautifulSoup
import logging

logger = logging.getLogger(__name__)

SINGLETON_TAGS = ("html", "head", "body", "title")


def validate_document(html: str) -> Tuple[bool, List[str]]:
    """
    Validate the structure of a generated HTML document.

    Args:
        html: Complete HTML document

    Returns:
        (is_valid, list_of_errors)
    """
    errors: List[str] = []

    if not isinstance(html, str) or not html.strip():
        errors.append("Document is empty")
        return (False, errors)

    if not html.lstrip().lower().startswith("<!doctype html>"):
        errors.append("Document must start with <!DOCTYPE html>")

    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        logger.warning(f"HTML parse error: {e}")
        errors.append(f"HTML parse error: {str(e)}")
        return (False, errors)

    for tag in SINGLETON_TAGS:
        count = len(soup.find_all(tag))
        if count != 1:
            errors.append(f"Expected exactly one <{tag}>, found {count}")

    head = soup.find("head")
    if head is not None and head.find("style") is None:
        errors.append("HTML missing inline <style> in <head>")

    # In-page anchors must resolve; omitted sections may not leave links behind
    ids = {element["id"] for element in soup.find_all(id=True)}
    for link in soup.find_all("a", href=True):
        href = link["href"]
        if href.startswith("#") and len(href) > 1 and href[1:] not in ids:
            errors.append(f"Broken in-page link: {href}")

    return (len(errors) == 0, errors)
