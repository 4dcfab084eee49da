"""Namespace and title handling for wiki resource paths."""

import unicodedata
from typing import Optional

from wikiroute.core.constants import (
    CANONICAL_NAMESPACES,
    LOCALIZED_NAMESPACES,
    MAIN_PAGE_TITLES,
    Namespace,
)


def normalize_page_title(title: str) -> str:
    """Normalize a page title for display and comparison.

    Replaces underscores with spaces, strips surrounding whitespace and
    applies NFC normalization. Titles arrive already percent-decoded from
    the resource path and are not decoded again.
    """
    title = title.replace("_", " ").strip()
    return unicodedata.normalize("NFC", title)


def _namespace_key(prefix: str) -> str:
    return " ".join(normalize_page_title(prefix).split()).casefold()


def lookup_namespace(prefix: str, language_code: str) -> Optional[Namespace]:
    """Look up a namespace prefix for a language.

    Localized names take precedence over the canonical English names,
    which are valid on every wiki.

    Args:
        prefix: Text before the first colon of a resource path
        language_code: Wiki language code (e.g. "en", "de")

    Returns:
        Namespace, or None if the prefix is not a namespace name
    """
    key = _namespace_key(prefix)
    localized = LOCALIZED_NAMESPACES.get(language_code.lower(), {})
    if key in localized:
        return localized[key]
    return CANONICAL_NAMESPACES.get(key)


def namespace_and_title(path: str, language_code: str) -> tuple[Namespace, str]:
    """Split a wiki resource path into namespace and title.

    The title keeps its original form ("MobileDiff/1...2", "Main_Page");
    only the namespace prefix is interpreted. Paths without a recognised
    prefix belong to the main namespace and keep the full path as title.

    Args:
        path: Wiki resource path (the part after "/wiki/")
        language_code: Wiki language code used for localized prefixes

    Returns:
        Tuple of (namespace, title)
    """
    prefix, separator, rest = path.partition(":")
    if not separator:
        return Namespace.MAIN, path

    namespace = lookup_namespace(prefix, language_code)
    if namespace is None:
        return Namespace.MAIN, path

    return namespace, rest


def is_main_page_title(title: str, language_code: str) -> bool:
    """Check if a title is the home page of a language's wiki.

    Args:
        title: Page title in any form (underscores, percent-encoding)
        language_code: Wiki language code

    Returns:
        True if title names the language's main page
    """
    main_page = MAIN_PAGE_TITLES.get(language_code.lower())
    if main_page is None:
        return False
    return normalize_page_title(title).casefold() == normalize_page_title(main_page).casefold()
