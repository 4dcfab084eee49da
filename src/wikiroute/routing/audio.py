"""Detection and playback adjustment of Wikimedia-hosted audio uploads.

Audio files live on upload.wikimedia.org. Ogg Vorbis uploads cannot be
played everywhere, so they are swapped for the MP3 rendition that the
transcoding service publishes next to the original:

    /wikipedia/commons/c/c8/Example.ogg
    /wikipedia/commons/transcoded/c/c8/Example.ogg/Example.ogg.mp3
"""

from pathlib import PurePosixPath
from urllib.parse import urlsplit, urlunsplit

from wikiroute.core.constants import (
    AUDIO_EXTENSIONS,
    AUDIO_UPLOAD_HOST,
    TRANSCODED_AUDIO_EXTENSIONS,
    TRANSCODED_AUDIO_SUFFIX,
    TRANSCODED_SEGMENT,
)


def _split_upload_url(url: str):
    try:
        parsed = urlsplit(url)
        host = parsed.hostname
    except ValueError:
        return None

    if host != AUDIO_UPLOAD_HOST:
        return None
    return parsed


def is_hosted_audio_link(url: str) -> bool:
    """Check if URL points at an audio file on the upload host.

    Args:
        url: URL to check

    Returns:
        True for upload.wikimedia.org URLs with an audio file extension
    """
    parsed = _split_upload_url(url)
    if parsed is None:
        return False

    return PurePosixPath(parsed.path).suffix.lower() in AUDIO_EXTENSIONS


def adjust_for_audio_playback(url: str) -> str:
    """Rewrite an Ogg upload URL to its transcoded MP3 rendition.

    URLs that are not Ogg uploads, or are already transcoded, are returned
    unchanged.

    Args:
        url: Hosted audio URL

    Returns:
        URL of a playable rendition
    """
    parsed = _split_upload_url(url)
    if parsed is None:
        return url

    path = PurePosixPath(parsed.path)
    if path.suffix.lower() not in TRANSCODED_AUDIO_EXTENSIONS:
        return url

    # ("/", "wikipedia", "commons", "c", "c8", "Example.ogg")
    parts = list(path.parts)
    if len(parts) < 4 or TRANSCODED_SEGMENT in parts:
        return url

    filename = parts[-1]
    parts.insert(3, TRANSCODED_SEGMENT)
    parts.append(filename + TRANSCODED_AUDIO_SUFFIX)
    new_path = str(PurePosixPath(*parts))

    return urlunsplit((parsed.scheme, parsed.netloc, new_path, parsed.query, parsed.fragment))
