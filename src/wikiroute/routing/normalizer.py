"""URL canonicalization and segmentation for routing.

This module provides the URL handling the classifiers build on. It handles:
- Scheme and host canonicalization (lowercase, https, desktop host)
- Default port removal
- Site URL extraction
- Wiki resource path (/wiki/...) and W resource path (/w/...) extraction
"""

from typing import Optional
from urllib.parse import unquote, urlsplit, urlunsplit, SplitResult

from wikiroute.core.constants import (
    IN_APP_WEB_VIEW_DOMAINS,
    W_RESOURCE_PREFIX,
    WIKI_RESOURCE_PREFIX,
)


class URLCanonicalizer:
    """Canonicalize URLs before classification.

    Canonicalization steps:
    1. Convert scheme and host to lowercase
    2. Default protocol-relative URLs to https
    3. Remove default ports (80 for HTTP, 443 for HTTPS)
    4. For wiki hosts, upgrade http to https
    5. For wiki hosts, replace the mobile host with the desktop host

    Paths, query strings and fragments are left untouched, so canonicalizing
    an already canonical URL is a no-op. Unparseable input is returned as is.
    """

    DEFAULT_PORTS = {
        'http': 80,
        'https': 443,
    }

    MOBILE_LABEL = 'm'

    def __init__(self, *, wiki_domains: tuple[str, ...] = IN_APP_WEB_VIEW_DOMAINS):
        """Initialize URLCanonicalizer.

        Args:
            wiki_domains: Domains whose hosts (and subdomains) are wiki hosts
        """
        self.wiki_domains = tuple(domain.lower() for domain in wiki_domains)

    def canonicalize(self, url: str) -> str:
        """Canonicalize a single URL.

        Args:
            url: URL to canonicalize

        Returns:
            Canonical URL string, or the input unchanged if it cannot be parsed
        """
        parsed = self._split(url)
        if parsed is None:
            return url

        scheme = parsed.scheme.lower()
        if not scheme and parsed.netloc:
            scheme = 'https'

        netloc = parsed.netloc
        path = parsed.path
        if netloc:
            userinfo, host, port = self._split_netloc(netloc)
            port = self._drop_default_port(port, scheme)

            if self._is_wiki_host(host):
                host = self._desktop_host(host)
                if scheme == 'http':
                    scheme = 'https'
                    port = self._drop_default_port(port, scheme)

            netloc = self._join_netloc(userinfo, host, port)
            if not path:
                path = '/'

        try:
            return urlunsplit((scheme, netloc, path, parsed.query, parsed.fragment))
        except ValueError:
            return url

    def get_host(self, url: str) -> Optional[str]:
        """Extract host from URL.

        Args:
            url: URL to process

        Returns:
            Lowercase host name (no port or userinfo), or None if absent
        """
        parsed = self._split(url)
        if parsed is None or not parsed.netloc:
            return None

        _, host, _ = self._split_netloc(parsed.netloc)
        return host or None

    def get_site_url(self, url: str) -> Optional[str]:
        """Extract the site (scheme + host) a URL belongs to.

        Args:
            url: URL to process

        Returns:
            Site URL such as "https://en.wikipedia.org", or None without a host
        """
        host = self.get_host(url)
        if host is None:
            return None

        parsed = self._split(url)
        scheme = parsed.scheme.lower() if parsed.scheme else 'https'
        return f"{scheme}://{host}"

    def get_query(self, url: str) -> Optional[str]:
        """Extract the raw query string, or None if the URL has none."""
        parsed = self._split(url)
        if parsed is None or not parsed.query:
            return None
        return parsed.query

    def get_wiki_resource_path(self, url: str) -> Optional[str]:
        """Extract the page-addressing portion of a /wiki/ URL.

        Args:
            url: URL to process

        Returns:
            Percent-decoded path after "/wiki/" (e.g. "Talk:Foo"), or None
        """
        return self._resource_path(url, WIKI_RESOURCE_PREFIX)

    def get_w_resource_path(self, url: str) -> Optional[str]:
        """Extract the script portion of a /w/ URL.

        Args:
            url: URL to process

        Returns:
            Path after "/w/" without the query (e.g. "index.php"), or None
        """
        return self._resource_path(url, W_RESOURCE_PREFIX)

    def _resource_path(self, url: str, prefix: str) -> Optional[str]:
        parsed = self._split(url)
        if parsed is None:
            return None

        path = parsed.path
        if not path.startswith(prefix) or len(path) == len(prefix):
            return None

        return unquote(path[len(prefix):])

    def _split(self, url: str) -> Optional[SplitResult]:
        if not url or not isinstance(url, str):
            return None

        try:
            parsed = urlsplit(url.strip())
            # Accessing port validates it
            parsed.port
        except ValueError:
            return None

        return parsed

    def _split_netloc(self, netloc: str) -> tuple[Optional[str], str, Optional[str]]:
        """Split netloc into (userinfo, lowercase host, port string)."""
        userinfo = None
        if '@' in netloc:
            userinfo, netloc = netloc.rsplit('@', 1)

        netloc = netloc.lower()
        port = None

        if netloc.startswith('['):
            # IPv6 literal
            end = netloc.find(']')
            host = netloc[:end + 1]
            rest = netloc[end + 1:]
            if rest.startswith(':'):
                port = rest[1:]
        elif ':' in netloc:
            netloc, port = netloc.rsplit(':', 1)
            host = netloc
        else:
            host = netloc

        return userinfo, host.rstrip('.'), port or None

    def _join_netloc(self, userinfo: Optional[str], host: str, port: Optional[str]) -> str:
        netloc = host
        if port:
            netloc = f"{netloc}:{port}"
        if userinfo is not None:
            netloc = f"{userinfo}@{netloc}"
        return netloc

    def _drop_default_port(self, port: Optional[str], scheme: str) -> Optional[str]:
        if port is None:
            return None

        try:
            if int(port) == self.DEFAULT_PORTS.get(scheme):
                return None
        except ValueError:
            # Port is not a number, keep as is
            pass

        return port

    def _is_wiki_host(self, host: str) -> bool:
        return any(host == domain or host.endswith('.' + domain) for domain in self.wiki_domains)

    def _desktop_host(self, host: str) -> str:
        """Map a mobile host to its desktop equivalent.

        "en.m.wikipedia.org" becomes "en.wikipedia.org" and
        "m.wikidata.org" becomes "www.wikidata.org". Every mobile label is
        removed in one pass so the mapping is idempotent.
        """
        labels = host.split('.')
        if len(labels) < 3:
            return host

        subdomains = labels[:-2]
        if self.MOBILE_LABEL not in subdomains:
            return host

        subdomains = [label for label in subdomains if label != self.MOBILE_LABEL]
        if not subdomains:
            subdomains = ['www']

        return '.'.join(subdomains + labels[-2:])
