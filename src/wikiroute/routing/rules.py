"""Ordered routing rules for special pages and legacy index.php URLs.

Rules are evaluated top to bottom and the first one producing a
destination wins. Both rule lists are module constants so their order is
visible and testable.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from wikiroute.core.models import (
    ArticleDiffCompare,
    ArticleDiffSingle,
    ArticleHistory,
    Destination,
    Search,
)
from wikiroute.routing.namespaces import normalize_page_title


MOBILEDIFF_COMPARE_PATTERN = re.compile(r"^mobilediff/([0-9]+)\.\.\.([0-9]+)", re.IGNORECASE)
MOBILEDIFF_SINGLE_PATTERN = re.compile(r"^mobilediff/([0-9]+)", re.IGNORECASE)
HISTORY_PATTERN = re.compile(r"^history/(.*)", re.IGNORECASE)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# ============================================================================
# Capture Helpers
# ============================================================================

def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a strict base-10 integer, or return None."""
    if value is None or not INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


def match_mobilediff_compare(title: str) -> Optional[tuple[int, int]]:
    """Capture (from, to) revision ids from "MobileDiff/<from>...<to>"."""
    match = MOBILEDIFF_COMPARE_PATTERN.match(title)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def match_mobilediff_single(title: str) -> Optional[int]:
    """Capture the revision id from "MobileDiff/<to>"."""
    match = MOBILEDIFF_SINGLE_PATTERN.match(title)
    if match is None:
        return None
    return int(match.group(1))


def match_history(title: str) -> Optional[str]:
    """Capture the normalized article title from "History/<title>"."""
    match = HISTORY_PATTERN.match(title)
    if match is None:
        return None
    return normalize_page_title(match.group(1)) or None


# ============================================================================
# Special Page Rules
# ============================================================================

@dataclass(frozen=True)
class SpecialPageRule:
    """Rule mapping a Special: page title to a destination."""
    name: str
    build: Callable[[str, str], Optional[Destination]]
    description: str = ""

    def apply(self, url: str, title: str) -> Optional[Destination]:
        return self.build(url, title)


def _diff_compare_from_title(url: str, title: str) -> Optional[Destination]:
    revisions = match_mobilediff_compare(title)
    if revisions is None:
        return None
    from_rev_id, to_rev_id = revisions
    return ArticleDiffCompare(url, from_rev_id=from_rev_id, to_rev_id=to_rev_id)


def _diff_single_from_title(url: str, title: str) -> Optional[Destination]:
    to_rev_id = match_mobilediff_single(title)
    if to_rev_id is None:
        return None
    return ArticleDiffSingle(url, from_rev_id=None, to_rev_id=to_rev_id)


def _history_from_title(url: str, title: str) -> Optional[Destination]:
    article_title = match_history(title)
    if article_title is None:
        return None
    return ArticleHistory(url, article_title=article_title)


# Compare must be tried before single: "MobileDiff/1...2" also matches single
SPECIAL_PAGE_RULES = (
    SpecialPageRule(
        name="mobilediff_compare",
        build=_diff_compare_from_title,
        description="Special:MobileDiff/<from>...<to>",
    ),
    SpecialPageRule(
        name="mobilediff_single",
        build=_diff_single_from_title,
        description="Special:MobileDiff/<to>",
    ),
    SpecialPageRule(
        name="history",
        build=_history_from_title,
        description="Special:History/<title>",
    ),
)


# ============================================================================
# Legacy Query Rules
# ============================================================================

@dataclass(frozen=True)
class QueryRule:
    """Rule mapping index.php query parameters to a destination.

    The rule only applies when every parameter in required_params is
    present; build may still decline by returning None.
    """
    name: str
    required_params: tuple[str, ...]
    build: Callable[[str, dict[str, str]], Optional[Destination]]
    description: str = ""

    def apply(self, url: str, params: dict[str, str]) -> Optional[Destination]:
        for param in self.required_params:
            if param not in params:
                return None
        return self.build(url, params)


def _search(url: str, params: dict[str, str]) -> Optional[Destination]:
    return Search(url, term=params["search"])


def _history(url: str, params: dict[str, str]) -> Optional[Destination]:
    if params["action"] != "history":
        return None
    return ArticleHistory(url, article_title=params["title"])


def _revision_compare(url: str, params: dict[str, str]) -> Optional[Destination]:
    if params["type"] != "revision":
        return None
    to_rev_id = parse_int(params["diff"])
    from_rev_id = parse_int(params["oldid"])
    if to_rev_id is None or from_rev_id is None:
        return None
    return ArticleDiffCompare(url, from_rev_id=from_rev_id, to_rev_id=to_rev_id)


def _diff_prev(url: str, params: dict[str, str]) -> Optional[Destination]:
    to_rev_id = parse_int(params["oldid"])
    if params["diff"] != "prev" or to_rev_id is None:
        return None
    return ArticleDiffCompare(url, from_rev_id=None, to_rev_id=to_rev_id)


def _diff_next(url: str, params: dict[str, str]) -> Optional[Destination]:
    from_rev_id = parse_int(params["oldid"])
    if params["diff"] != "next" or from_rev_id is None:
        return None
    return ArticleDiffCompare(url, from_rev_id=from_rev_id, to_rev_id=None)


def _single_revision(url: str, params: dict[str, str]) -> Optional[Destination]:
    to_rev_id = parse_int(params["oldid"])
    if to_rev_id is None:
        return None
    return ArticleDiffSingle(url, from_rev_id=None, to_rev_id=to_rev_id)


# Every rule after "search" requires a title
LEGACY_QUERY_RULES = (
    QueryRule(
        name="search",
        required_params=("search",),
        build=_search,
        description="index.php?search=<term>",
    ),
    QueryRule(
        # TODO: open the requested history slice once paged history exists
        name="paged_history",
        required_params=("title", "limit", "dir", "action"),
        build=_history,
        description="index.php?title=<t>&action=history&limit=<n>&dir=<d>",
    ),
    QueryRule(
        name="history",
        required_params=("title", "action"),
        build=_history,
        description="index.php?title=<t>&action=history",
    ),
    QueryRule(
        name="revision_compare",
        required_params=("title", "type", "diff", "oldid"),
        build=_revision_compare,
        description="index.php?title=<t>&type=revision&diff=<to>&oldid=<from>",
    ),
    QueryRule(
        name="diff_prev",
        required_params=("title", "diff", "oldid"),
        build=_diff_prev,
        description="index.php?title=<t>&diff=prev&oldid=<to>",
    ),
    QueryRule(
        name="diff_next",
        required_params=("title", "diff", "oldid"),
        build=_diff_next,
        description="index.php?title=<t>&diff=next&oldid=<from>",
    ),
    QueryRule(
        name="single_revision",
        required_params=("title", "oldid"),
        build=_single_revision,
        description="index.php?title=<t>&oldid=<to>",
    ),
)
