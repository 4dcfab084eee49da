"""URL routing for Wikimedia links.

This package maps URLs to in-app destinations:
- URLCanonicalizer: Canonicalize URLs and extract resource paths
- ProjectResolver: Identify the wiki project a URL belongs to
- PathClassifier: Classify /wiki/ resource paths by namespace
- LegacyQueryClassifier: Classify /w/index.php query URLs
- FallbackClassifier: Choose between in-app web view and external browser
- Router: Compose the strategies in order
"""

from wikiroute.routing.normalizer import URLCanonicalizer
from wikiroute.routing.projects import ProjectResolver
from wikiroute.routing.resolvers import (
    FallbackClassifier,
    LegacyQueryClassifier,
    PathClassifier,
)
from wikiroute.routing.router import Router

__all__ = [
    "URLCanonicalizer",
    "ProjectResolver",
    "PathClassifier",
    "LegacyQueryClassifier",
    "FallbackClassifier",
    "Router",
]
