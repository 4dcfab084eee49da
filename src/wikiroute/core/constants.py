"""Constants used throughout wikiroute.

This module contains enums, default values, and static lookup tables
(namespaces, main page titles, project families) to ensure consistency
across the routing engine.
"""

from enum import Enum


class Namespace(Enum):
    """Wiki namespace a page title belongs to."""
    TALK = "talk"
    USER_TALK = "user_talk"
    SPECIAL = "special"
    MAIN = "main"
    PROJECT_META = "project_meta"
    OTHER = "other"


class DestinationKind(str, Enum):
    """Case tags of the closed destination set."""
    IN_APP_LINK = "in_app_link"
    EXTERNAL_LINK = "external_link"
    ARTICLE = "article"
    ARTICLE_HISTORY = "article_history"
    ARTICLE_DIFF_COMPARE = "article_diff_compare"
    ARTICLE_DIFF_SINGLE = "article_diff_single"
    TALK = "talk"
    USER_TALK = "user_talk"
    SEARCH = "search"
    AUDIO = "audio"
    ON_THIS_DAY = "on_this_day"


class ProjectFamily(Enum):
    """Wikimedia project families the resolver recognises."""
    WIKIPEDIA = "wikipedia"
    WIKTIONARY = "wiktionary"
    WIKIQUOTE = "wikiquote"
    WIKIBOOKS = "wikibooks"
    WIKISOURCE = "wikisource"
    WIKINEWS = "wikinews"
    WIKIVERSITY = "wikiversity"
    WIKIVOYAGE = "wikivoyage"
    COMMONS = "commons"
    WIKIDATA = "wikidata"
    MEDIAWIKI = "mediawiki"
    SPECIES = "species"


# Destinations that hand the URL to a web view or the system browser
BROWSER_DESTINATION_KINDS = frozenset({
    DestinationKind.IN_APP_LINK,
    DestinationKind.EXTERNAL_LINK,
})


# Path prefixes identifying resource paths
WIKI_RESOURCE_PREFIX = "/wiki/"
W_RESOURCE_PREFIX = "/w/"

LEGACY_INDEX_PAGE = "index.php"

ON_THIS_DAY_TITLE_SNIPPET = "On_this_day"


# Language-subdomain families: <lang>.<family>.org
LANGUAGE_FAMILY_DOMAINS = {
    "wikipedia.org": ProjectFamily.WIKIPEDIA,
    "wiktionary.org": ProjectFamily.WIKTIONARY,
    "wikiquote.org": ProjectFamily.WIKIQUOTE,
    "wikibooks.org": ProjectFamily.WIKIBOOKS,
    "wikisource.org": ProjectFamily.WIKISOURCE,
    "wikinews.org": ProjectFamily.WIKINEWS,
    "wikiversity.org": ProjectFamily.WIKIVERSITY,
    "wikivoyage.org": ProjectFamily.WIKIVOYAGE,
}

# Single-site families, matched on the full (desktop) host
SINGLE_SITE_HOSTS = {
    "commons.wikimedia.org": ProjectFamily.COMMONS,
    "species.wikimedia.org": ProjectFamily.SPECIES,
    "www.wikidata.org": ProjectFamily.WIKIDATA,
    "wikidata.org": ProjectFamily.WIKIDATA,
    "www.mediawiki.org": ProjectFamily.MEDIAWIKI,
    "mediawiki.org": ProjectFamily.MEDIAWIKI,
}

# Subdomains of language families that are not languages
NON_LANGUAGE_SUBDOMAINS = {"www", "meta", "upload", "api", "donate", "m"}

# Capability flags per family
PROJECT_CAPABILITIES = {
    ProjectFamily.WIKIPEDIA: {
        "supports_native_user_talk_pages": True,
        "supports_native_diff_pages": True,
        "main_namespace_goes_to_native_article_view": True,
        "considers_w_resource_paths_for_routing": True,
    },
    ProjectFamily.COMMONS: {
        "supports_native_user_talk_pages": True,
        "supports_native_diff_pages": True,
        "main_namespace_goes_to_native_article_view": False,
        "considers_w_resource_paths_for_routing": True,
    },
    ProjectFamily.WIKIDATA: {
        "supports_native_user_talk_pages": True,
        "supports_native_diff_pages": True,
        "main_namespace_goes_to_native_article_view": False,
        "considers_w_resource_paths_for_routing": True,
    },
    ProjectFamily.MEDIAWIKI: {
        "supports_native_user_talk_pages": True,
        "supports_native_diff_pages": True,
        "main_namespace_goes_to_native_article_view": False,
        "considers_w_resource_paths_for_routing": True,
    },
}

# Families missing from PROJECT_CAPABILITIES get everything disabled
NO_CAPABILITIES = {
    "supports_native_user_talk_pages": False,
    "supports_native_diff_pages": False,
    "main_namespace_goes_to_native_article_view": False,
    "considers_w_resource_paths_for_routing": False,
}


# Hosts (and their subdomains) allowed to open in the in-app web view
IN_APP_WEB_VIEW_DOMAINS = (
    "wikipedia.org",
    "wikimedia.org",
    "mediawiki.org",
    "wikidata.org",
    "wiktionary.org",
    "wikiquote.org",
    "wikibooks.org",
    "wikisource.org",
    "wikinews.org",
    "wikiversity.org",
    "wikivoyage.org",
    "wikimediafoundation.org",
    "wmcloud.org",
    "wmflabs.org",
)


# Audio uploads
AUDIO_UPLOAD_HOST = "upload.wikimedia.org"
AUDIO_EXTENSIONS = {'.ogg', '.oga', '.mp3', '.wav', '.flac', '.opus', '.m4a'}
TRANSCODED_AUDIO_EXTENSIONS = {'.ogg', '.oga'}
TRANSCODED_SEGMENT = "transcoded"
TRANSCODED_AUDIO_SUFFIX = ".mp3"


# Canonical (English) namespace names, valid on every wiki.
# Keys are compared after replacing underscores and case folding.
CANONICAL_NAMESPACES = {
    "talk": Namespace.TALK,
    "user talk": Namespace.USER_TALK,
    "special": Namespace.SPECIAL,
    "project": Namespace.PROJECT_META,
    "wikipedia": Namespace.PROJECT_META,
    "wp": Namespace.PROJECT_META,
    "user": Namespace.OTHER,
    "file": Namespace.OTHER,
    "image": Namespace.OTHER,
    "media": Namespace.OTHER,
    "template": Namespace.OTHER,
    "category": Namespace.OTHER,
    "help": Namespace.OTHER,
    "portal": Namespace.OTHER,
    "draft": Namespace.OTHER,
    "module": Namespace.OTHER,
    "mediawiki": Namespace.OTHER,
    "project talk": Namespace.OTHER,
    "wikipedia talk": Namespace.OTHER,
    "file talk": Namespace.OTHER,
    "template talk": Namespace.OTHER,
    "category talk": Namespace.OTHER,
    "help talk": Namespace.OTHER,
    "portal talk": Namespace.OTHER,
    "draft talk": Namespace.OTHER,
    "module talk": Namespace.OTHER,
    "mediawiki talk": Namespace.OTHER,
}

# Localized namespace names per language code
LOCALIZED_NAMESPACES = {
    "de": {
        "diskussion": Namespace.TALK,
        "benutzer diskussion": Namespace.USER_TALK,
        "benutzerin diskussion": Namespace.USER_TALK,
        "spezial": Namespace.SPECIAL,
        "benutzer": Namespace.OTHER,
        "datei": Namespace.OTHER,
        "vorlage": Namespace.OTHER,
        "kategorie": Namespace.OTHER,
        "hilfe": Namespace.OTHER,
    },
    "fr": {
        "discussion": Namespace.TALK,
        "discussion utilisateur": Namespace.USER_TALK,
        "discussion utilisatrice": Namespace.USER_TALK,
        "spécial": Namespace.SPECIAL,
        "wikipédia": Namespace.PROJECT_META,
        "utilisateur": Namespace.OTHER,
        "fichier": Namespace.OTHER,
        "modèle": Namespace.OTHER,
        "catégorie": Namespace.OTHER,
        "aide": Namespace.OTHER,
    },
    "es": {
        "discusión": Namespace.TALK,
        "usuario discusión": Namespace.USER_TALK,
        "usuaria discusión": Namespace.USER_TALK,
        "especial": Namespace.SPECIAL,
        "usuario": Namespace.OTHER,
        "archivo": Namespace.OTHER,
        "plantilla": Namespace.OTHER,
        "categoría": Namespace.OTHER,
        "ayuda": Namespace.OTHER,
    },
    "it": {
        "discussione": Namespace.TALK,
        "discussioni utente": Namespace.USER_TALK,
        "speciale": Namespace.SPECIAL,
        "utente": Namespace.OTHER,
        "file": Namespace.OTHER,
        "template": Namespace.OTHER,
        "categoria": Namespace.OTHER,
        "aiuto": Namespace.OTHER,
    },
    "pt": {
        "discussão": Namespace.TALK,
        "usuário discussão": Namespace.USER_TALK,
        "utilizador discussão": Namespace.USER_TALK,
        "especial": Namespace.SPECIAL,
        "wikipédia": Namespace.PROJECT_META,
        "usuário": Namespace.OTHER,
        "ficheiro": Namespace.OTHER,
        "predefinição": Namespace.OTHER,
        "categoria": Namespace.OTHER,
        "ajuda": Namespace.OTHER,
    },
    "nl": {
        "overleg": Namespace.TALK,
        "overleg gebruiker": Namespace.USER_TALK,
        "speciaal": Namespace.SPECIAL,
        "gebruiker": Namespace.OTHER,
        "bestand": Namespace.OTHER,
        "sjabloon": Namespace.OTHER,
        "categorie": Namespace.OTHER,
    },
    "ru": {
        "обсуждение": Namespace.TALK,
        "обсуждение участника": Namespace.USER_TALK,
        "обсуждение участницы": Namespace.USER_TALK,
        "служебная": Namespace.SPECIAL,
        "википедия": Namespace.PROJECT_META,
        "участник": Namespace.OTHER,
        "участница": Namespace.OTHER,
        "файл": Namespace.OTHER,
        "шаблон": Namespace.OTHER,
        "категория": Namespace.OTHER,
    },
    "ja": {
        "ノート": Namespace.TALK,
        "利用者‐会話": Namespace.USER_TALK,
        "特別": Namespace.SPECIAL,
        "利用者": Namespace.OTHER,
        "ファイル": Namespace.OTHER,
        "テンプレート": Namespace.OTHER,
        "カテゴリ": Namespace.OTHER,
    },
    "pl": {
        "dyskusja": Namespace.TALK,
        "dyskusja wikipedysty": Namespace.USER_TALK,
        "dyskusja wikipedystki": Namespace.USER_TALK,
        "specjalna": Namespace.SPECIAL,
        "wikipedysta": Namespace.OTHER,
        "plik": Namespace.OTHER,
        "szablon": Namespace.OTHER,
        "kategoria": Namespace.OTHER,
    },
    "sv": {
        "diskussion": Namespace.TALK,
        "användardiskussion": Namespace.USER_TALK,
        "special": Namespace.SPECIAL,
        "användare": Namespace.OTHER,
        "fil": Namespace.OTHER,
        "mall": Namespace.OTHER,
        "kategori": Namespace.OTHER,
    },
    "zh": {
        "talk": Namespace.TALK,
        "討論": Namespace.TALK,
        "讨论": Namespace.TALK,
        "user talk": Namespace.USER_TALK,
        "用户讨论": Namespace.USER_TALK,
        "使用者討論": Namespace.USER_TALK,
        "special": Namespace.SPECIAL,
        "特殊": Namespace.SPECIAL,
        "wikipedia": Namespace.PROJECT_META,
        "维基百科": Namespace.PROJECT_META,
        "維基百科": Namespace.PROJECT_META,
    },
}

# Home page titles per language code. Only home pages in the main
# namespace are listed; the others are already excluded by namespace.
MAIN_PAGE_TITLES = {
    "en": "Main Page",
    "test": "Main Page",
    "simple": "Main Page",
    "it": "Pagina principale",
    "nl": "Hoofdpagina",
    "ru": "Заглавная страница",
    "ja": "メインページ",
}


# Application-wide defaults
DEFAULTS = {
    "language_code": "en",
    "native_talk_pages": False,
}
