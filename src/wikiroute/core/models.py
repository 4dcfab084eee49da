"""Core data models for wikiroute.

This module defines the data structures shared by the routing engine:
the project descriptor consumed by the classifiers, the closed set of
destinations they produce, and the router configuration.
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Union

from wikiroute.core.constants import (
    DEFAULTS,
    IN_APP_WEB_VIEW_DOMAINS,
    PROJECT_CAPABILITIES,
    DestinationKind,
    ProjectFamily,
)


# ============================================================================
# Project Model
# ============================================================================

@dataclass(frozen=True)
class ProjectDescriptor:
    """Language and routing capabilities of the wiki a URL targets.

    Descriptors are resolved from each URL's own site and are never cached
    between classifications.
    """
    family: ProjectFamily
    language_code: Optional[str] = None     # None for single-site projects
    supports_native_user_talk_pages: bool = False
    supports_native_diff_pages: bool = False
    main_namespace_goes_to_native_article_view: bool = False
    considers_w_resource_paths_for_routing: bool = False


# ============================================================================
# Destination Models
# ============================================================================

@dataclass(frozen=True)
class InAppLink:
    """Open in the in-app web view."""
    kind: ClassVar[DestinationKind] = DestinationKind.IN_APP_LINK
    url: str


@dataclass(frozen=True)
class ExternalLink:
    """Hand off to the system browser."""
    kind: ClassVar[DestinationKind] = DestinationKind.EXTERNAL_LINK
    url: str


@dataclass(frozen=True)
class Article:
    kind: ClassVar[DestinationKind] = DestinationKind.ARTICLE
    url: str


@dataclass(frozen=True)
class ArticleHistory:
    kind: ClassVar[DestinationKind] = DestinationKind.ARTICLE_HISTORY
    url: str
    article_title: str


@dataclass(frozen=True)
class ArticleDiffCompare:
    """Diff between two revisions; either side may be unknown."""
    kind: ClassVar[DestinationKind] = DestinationKind.ARTICLE_DIFF_COMPARE
    url: str
    from_rev_id: Optional[int] = None
    to_rev_id: Optional[int] = None


@dataclass(frozen=True)
class ArticleDiffSingle:
    """Single revision diffed against its parent."""
    kind: ClassVar[DestinationKind] = DestinationKind.ARTICLE_DIFF_SINGLE
    url: str
    from_rev_id: Optional[int] = None
    to_rev_id: Optional[int] = None


@dataclass(frozen=True)
class Talk:
    kind: ClassVar[DestinationKind] = DestinationKind.TALK
    url: str


@dataclass(frozen=True)
class UserTalk:
    kind: ClassVar[DestinationKind] = DestinationKind.USER_TALK
    url: str


@dataclass(frozen=True)
class Search:
    kind: ClassVar[DestinationKind] = DestinationKind.SEARCH
    url: str
    term: Optional[str] = None


@dataclass(frozen=True)
class Audio:
    kind: ClassVar[DestinationKind] = DestinationKind.AUDIO
    url: str


@dataclass(frozen=True)
class OnThisDay:
    kind: ClassVar[DestinationKind] = DestinationKind.ON_THIS_DAY
    selected_index: Optional[int] = None


Destination = Union[
    InAppLink,
    ExternalLink,
    Article,
    ArticleHistory,
    ArticleDiffCompare,
    ArticleDiffSingle,
    Talk,
    UserTalk,
    Search,
    Audio,
    OnThisDay,
]

# One class per case tag
DESTINATION_TYPES: dict[DestinationKind, type] = {
    DestinationKind.IN_APP_LINK: InAppLink,
    DestinationKind.EXTERNAL_LINK: ExternalLink,
    DestinationKind.ARTICLE: Article,
    DestinationKind.ARTICLE_HISTORY: ArticleHistory,
    DestinationKind.ARTICLE_DIFF_COMPARE: ArticleDiffCompare,
    DestinationKind.ARTICLE_DIFF_SINGLE: ArticleDiffSingle,
    DestinationKind.TALK: Talk,
    DestinationKind.USER_TALK: UserTalk,
    DestinationKind.SEARCH: Search,
    DestinationKind.AUDIO: Audio,
    DestinationKind.ON_THIS_DAY: OnThisDay,
}


def destination_to_dict(destination: Destination) -> dict[str, Any]:
    """Convert a destination to a JSON-serializable dictionary.

    Args:
        destination: Destination to convert

    Returns:
        Dictionary with the case tag under "kind" followed by the payload

    Raises:
        TypeError: If destination is not one of the destination classes
    """
    kind = getattr(destination, "kind", None)
    if kind not in DESTINATION_TYPES or type(destination) is not DESTINATION_TYPES[kind]:
        raise TypeError(f"Not a destination: {destination!r}")

    data: dict[str, Any] = {"kind": kind.value}
    for item in fields(destination):
        data[item.name] = getattr(destination, item.name)
    return data


# ============================================================================
# Router Configuration Model
# ============================================================================

def _default_capabilities() -> dict[ProjectFamily, dict[str, bool]]:
    return {family: dict(flags) for family, flags in PROJECT_CAPABILITIES.items()}


@dataclass(frozen=True)
class RouterConfig:
    """Read-only configuration shared by the routing collaborators.

    The capability table is copied into read-only mappings, so a config
    stays hashable and cannot be changed after construction.
    """
    in_app_domains: tuple[str, ...] = IN_APP_WEB_VIEW_DOMAINS
    native_talk_pages: bool = DEFAULTS["native_talk_pages"]
    default_language: str = DEFAULTS["language_code"]
    # Excluded from the hash; equal configs still hash equal
    project_capabilities: Mapping[ProjectFamily, Mapping[str, bool]] = field(
        default_factory=_default_capabilities, hash=False
    )

    def __post_init__(self):
        table = MappingProxyType({
            family: MappingProxyType(dict(flags))
            for family, flags in self.project_capabilities.items()
        })
        object.__setattr__(self, "project_capabilities", table)

    def host_can_route_to_in_app_web_view(self, host: Optional[str]) -> bool:
        """Check if a host may be shown in the in-app web view.

        Args:
            host: Host name (without port), or None

        Returns:
            True if host equals or is a subdomain of an allowed domain
        """
        if not host:
            return False

        host = host.lower().rstrip(".")
        for domain in self.in_app_domains:
            domain = domain.lower()
            if host == domain or host.endswith("." + domain):
                return True
        return False
