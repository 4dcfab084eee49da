"""Resolution of the Wikimedia project a site URL belongs to."""

from typing import Optional
from urllib.parse import urlsplit

from wikiroute.core.constants import (
    LANGUAGE_FAMILY_DOMAINS,
    NO_CAPABILITIES,
    NON_LANGUAGE_SUBDOMAINS,
    SINGLE_SITE_HOSTS,
    ProjectFamily,
)
from wikiroute.core.models import ProjectDescriptor, RouterConfig


class ProjectResolver:
    """Map site URLs to project descriptors.

    Language families are recognised as "<lang>.<family>.org" and carry the
    language code; single-site projects (Commons, Wikidata, MediaWiki,
    Species) are matched on their desktop host and carry none. Capability
    flags come from the configuration's capability table.
    """

    def __init__(self, config: Optional[RouterConfig] = None):
        """Initialize ProjectResolver.

        Args:
            config: Router configuration (uses defaults if None)
        """
        self.config = config or RouterConfig()

    def resolve(self, site_url: Optional[str]) -> Optional[ProjectDescriptor]:
        """Resolve the project of a site URL.

        Args:
            site_url: Site URL such as "https://de.wikipedia.org"

        Returns:
            ProjectDescriptor, or None if the host is not a known project
        """
        if not site_url:
            return None

        try:
            host = urlsplit(site_url).hostname
        except ValueError:
            return None

        if not host:
            return None

        host = host.rstrip(".")

        family = SINGLE_SITE_HOSTS.get(host)
        if family is not None:
            return self._describe(family, None)

        language, _, domain = host.partition(".")
        family = LANGUAGE_FAMILY_DOMAINS.get(domain)
        if family is None or not language or language in NON_LANGUAGE_SUBDOMAINS:
            return None

        return self._describe(family, language)

    def _describe(self, family: ProjectFamily, language_code: Optional[str]) -> ProjectDescriptor:
        flags = self.config.project_capabilities.get(family, NO_CAPABILITIES)
        return ProjectDescriptor(
            family=family,
            language_code=language_code,
            supports_native_user_talk_pages=flags.get("supports_native_user_talk_pages", False),
            supports_native_diff_pages=flags.get("supports_native_diff_pages", False),
            main_namespace_goes_to_native_article_view=flags.get(
                "main_namespace_goes_to_native_article_view", False
            ),
            considers_w_resource_paths_for_routing=flags.get(
                "considers_w_resource_paths_for_routing", False
            ),
        )
