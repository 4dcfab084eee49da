"""Router mapping URLs to in-app destinations.

This module provides the Router class that composes the project resolver
and the resolution strategies in strict order:

1. Project resolution (no project: audio detection, then host fallback)
2. Wiki resource paths (/wiki/...)
3. Legacy index.php queries (/w/index.php?...)
4. Host fallback (in-app web view or external browser)
"""

import logging
from typing import Iterable, Optional

from wikiroute.core.constants import BROWSER_DESTINATION_KINDS
from wikiroute.core.models import Audio, Destination, ProjectDescriptor, RouterConfig
from wikiroute.routing.audio import adjust_for_audio_playback, is_hosted_audio_link
from wikiroute.routing.normalizer import URLCanonicalizer
from wikiroute.routing.projects import ProjectResolver
from wikiroute.routing.resolvers import (
    FallbackClassifier,
    LegacyQueryClassifier,
    PathClassifier,
)


logger = logging.getLogger(__name__)


class Router:
    """Classify URLs into destinations.

    The router holds no mutable state; its collaborators are read-only and
    injected at construction, so one instance may be shared across threads.
    """

    def __init__(
        self,
        config: Optional[RouterConfig] = None,
        *,
        canonicalizer: Optional[URLCanonicalizer] = None,
        project_resolver: Optional[ProjectResolver] = None,
    ):
        """Initialize Router.

        Args:
            config: Router configuration (uses defaults if None)
            canonicalizer: URLCanonicalizer instance (creates default if None)
            project_resolver: ProjectResolver instance (creates default if None)
        """
        self.config = config or RouterConfig()
        self.canonicalizer = canonicalizer or URLCanonicalizer(
            wiki_domains=self.config.in_app_domains
        )
        self.project_resolver = project_resolver or ProjectResolver(self.config)

        self.path_classifier = PathClassifier(self.config, canonicalizer=self.canonicalizer)
        self.query_classifier = LegacyQueryClassifier(self.config, canonicalizer=self.canonicalizer)
        self.fallback_classifier = FallbackClassifier(self.config, canonicalizer=self.canonicalizer)

    def destination(self, url: str) -> Destination:
        """Get the destination for a URL.

        Never raises: URLs that match nothing degrade to an in-app or
        external link.

        Args:
            url: URL to classify

        Returns:
            Destination for the URL
        """
        canonical = self.canonicalizer.canonicalize(url)
        project = self.project_resolver.resolve(self.canonicalizer.get_site_url(canonical))

        if project is None:
            if is_hosted_audio_link(canonical):
                destination = Audio(adjust_for_audio_playback(canonical))
            else:
                destination = self.fallback_classifier.classify(canonical)
        else:
            destination = self._destination_for_host_url(canonical, project)

        logger.debug(
            "Routed %s to %s (project: %s)",
            url,
            destination.kind.value,
            project.family.value if project else None,
        )
        return destination

    def does_open_in_browser(self, url: str) -> bool:
        """Check if a URL ends up in a web view or the system browser.

        Args:
            url: URL to check

        Returns:
            True if the destination is an in-app or external link
        """
        return self.destination(url).kind in BROWSER_DESTINATION_KINDS

    def destinations(self, urls: Iterable[str]) -> list[Destination]:
        """Classify a batch of URLs.

        Args:
            urls: URLs to classify

        Returns:
            List of destinations in input order
        """
        return [self.destination(url) for url in urls]

    def _destination_for_host_url(self, url: str, project: ProjectDescriptor) -> Destination:
        destination = self.path_classifier.classify(url, project)
        if destination is not None:
            return destination

        destination = self.query_classifier.classify(url, project)
        if destination is not None:
            return destination

        return self.fallback_classifier.classify(url)
