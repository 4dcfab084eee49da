"""Resolution strategies used by the router.

Each strategy either returns a destination or None, meaning "not handled
here, try the next strategy". The fallback strategy always returns a
destination.
"""

from typing import Optional
from urllib.parse import parse_qsl

from wikiroute.core.constants import (
    LEGACY_INDEX_PAGE,
    ON_THIS_DAY_TITLE_SNIPPET,
    Namespace,
)
from wikiroute.core.models import (
    Article,
    Destination,
    ExternalLink,
    InAppLink,
    OnThisDay,
    ProjectDescriptor,
    RouterConfig,
    Talk,
    UserTalk,
)
from wikiroute.routing.namespaces import (
    is_main_page_title,
    namespace_and_title,
    normalize_page_title,
)
from wikiroute.routing.normalizer import URLCanonicalizer
from wikiroute.routing.rules import LEGACY_QUERY_RULES, SPECIAL_PAGE_RULES, parse_int


class PathClassifier:
    """Classify /wiki/<Namespace:Title> URLs.

    Dispatches on the namespace of the resource path:
    - Talk: native talk page when the feature flag and project allow it
    - User talk: native user talk page when the project allows it
    - Special: MobileDiff and History pages when the project has native diffs
    - Main: native article view unless the title is the main page
    - Project (Wikipedia:): "On this day" pages
    """

    def __init__(
        self,
        config: RouterConfig,
        *,
        canonicalizer: Optional[URLCanonicalizer] = None,
        special_page_rules=SPECIAL_PAGE_RULES,
    ):
        self.config = config
        self.canonicalizer = canonicalizer or URLCanonicalizer(wiki_domains=config.in_app_domains)
        self.special_page_rules = tuple(special_page_rules)
        self._handlers = {
            Namespace.TALK: self._talk,
            Namespace.USER_TALK: self._user_talk,
            Namespace.SPECIAL: self._special,
            Namespace.MAIN: self._main,
            Namespace.PROJECT_META: self._project_meta,
        }

    def classify(self, url: str, project: ProjectDescriptor) -> Optional[Destination]:
        """Classify a canonical URL by its wiki resource path.

        Args:
            url: Canonical URL
            project: Project the URL belongs to

        Returns:
            Destination, or None if the path is not handled natively
        """
        path = self.canonicalizer.get_wiki_resource_path(url)
        if path is None:
            return None

        language = project.language_code or self.config.default_language
        namespace, title = namespace_and_title(path, language)

        handler = self._handlers.get(namespace)
        if handler is None:
            return None

        return handler(url, project, title, language)

    def _talk(self, url, project, title, language):
        if self.config.native_talk_pages and project.supports_native_user_talk_pages:
            return Talk(url)
        return None

    def _user_talk(self, url, project, title, language):
        if project.supports_native_user_talk_pages:
            return UserTalk(url)
        return None

    def _special(self, url, project, title, language):
        if not project.supports_native_diff_pages:
            return None

        for rule in self.special_page_rules:
            destination = rule.apply(url, title)
            if destination is not None:
                return destination

        return None

    def _main(self, url, project, title, language):
        if not project.main_namespace_goes_to_native_article_view:
            return None
        if is_main_page_title(title, language):
            return None
        return Article(url)

    def _project_meta(self, url, project, title, language):
        if not project.considers_w_resource_paths_for_routing:
            return None

        snippet = normalize_page_title(ON_THIS_DAY_TITLE_SNIPPET).casefold()
        if snippet not in normalize_page_title(title).casefold():
            return None

        # e.g. /wiki/Wikipedia:On_this_day/Today?3
        return OnThisDay(parse_int(self.canonicalizer.get_query(url)))


class LegacyQueryClassifier:
    """Classify /w/index.php?... URLs by their query parameters.

    Parameters are evaluated against LEGACY_QUERY_RULES in order; the last
    occurrence of a repeated parameter wins.
    """

    def __init__(
        self,
        config: RouterConfig,
        *,
        canonicalizer: Optional[URLCanonicalizer] = None,
        query_rules=LEGACY_QUERY_RULES,
    ):
        self.config = config
        self.canonicalizer = canonicalizer or URLCanonicalizer(wiki_domains=config.in_app_domains)
        self.query_rules = tuple(query_rules)

    def classify(self, url: str, project: ProjectDescriptor) -> Optional[Destination]:
        """Classify a canonical URL by its index.php query.

        Args:
            url: Canonical URL
            project: Project the URL belongs to

        Returns:
            Destination, or None if no rule applies
        """
        if not project.considers_w_resource_paths_for_routing:
            return None

        path = self.canonicalizer.get_w_resource_path(url)
        if path is None or path.lower() != LEGACY_INDEX_PAGE:
            return None

        query = self.canonicalizer.get_query(url)
        if query is None:
            return None

        params = self.parse_params(query)

        for rule in self.query_rules:
            destination = rule.apply(url, params)
            if destination is not None:
                return destination

        return None

    @staticmethod
    def parse_params(query: str) -> dict[str, str]:
        """Parse a query string into a name -> value mapping.

        Args:
            query: Raw query string

        Returns:
            Mapping where the last occurrence of each name wins
        """
        return dict(parse_qsl(query, keep_blank_values=True))


class FallbackClassifier:
    """Choose between the in-app web view and the external browser."""

    def __init__(self, config: RouterConfig, *, canonicalizer: Optional[URLCanonicalizer] = None):
        self.config = config
        self.canonicalizer = canonicalizer or URLCanonicalizer(wiki_domains=config.in_app_domains)

    def classify(self, url: str) -> Destination:
        """Classify a URL by its host.

        Args:
            url: URL in any form

        Returns:
            InAppLink for allowed hosts, ExternalLink otherwise
        """
        canonical = self.canonicalizer.canonicalize(url)
        host = self.canonicalizer.get_host(canonical)

        if self.config.host_can_route_to_in_app_web_view(host):
            return InAppLink(canonical)
        return ExternalLink(canonical)
