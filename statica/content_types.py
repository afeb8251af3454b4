"""
The Content-Type Inference Table.

Maps a bare, lower-case file extension (``"css"``, ``"js"``) to the value sent
in the ``Content-Type`` header. Built once at import time from whitenoise's
media types and never mutated afterwards, so every request can read it
without locking.
"""

import posixpath
import types

from whitenoise.media_types import default_types

from .statics import DEFAULT_CONTENT_TYPE, DEFAULT_ENCODING

OVERRIDES = {
    "js": "application/javascript",
    "mjs": "application/javascript",
    "json": "application/json",
    "map": "application/json",
    "webmanifest": "application/manifest+json",
}

TEXTUAL_TYPES = {
    "application/javascript",
    "application/json",
    "application/manifest+json",
    "application/xml",
    "application/rss+xml",
    "application/atom+xml",
    "image/svg+xml",
}


def is_textual(mimetype):
    return mimetype.startswith("text/") or mimetype in TEXTUAL_TYPES


def with_charset(mimetype, charset=DEFAULT_ENCODING):
    if is_textual(mimetype):
        return f"{mimetype}; charset={charset}"
    return mimetype


def build_table(extra_types=None):
    """Builds a read-only extension table.

    :param extra_types: Additional ``{extension: mimetype}`` entries. They win
                        over both the whitenoise defaults and the overrides.
    """
    table = {}
    for key, mimetype in default_types().items():
        # whitenoise also maps a few full filenames; only extensions apply here.
        if key.startswith("."):
            table[key[1:].lower()] = mimetype
    table.update(OVERRIDES)
    for key, mimetype in (extra_types or {}).items():
        table[normalize_extension(key)] = mimetype

    return types.MappingProxyType(
        {key: with_charset(mimetype) for key, mimetype in table.items()}
    )


def normalize_extension(value):
    return value.strip().lstrip(".").lower()


def extension_of(value):
    """Extracts the extension from a bare token or a file name.

    ``"js"``, ``".js"``, ``"app.js"`` and ``"/static/app.js"`` all give
    ``"js"``. A name without a dot is treated as the extension itself.
    """
    name = posixpath.basename(value.strip())
    if "." not in name:
        return normalize_extension(name)

    _, ext = posixpath.splitext(name)
    if not ext:
        # Dot files such as ".css" carry no stem.
        return normalize_extension(name)
    return normalize_extension(ext)


def lookup(value, table=None, default=DEFAULT_CONTENT_TYPE):
    """Returns the content type for an extension or file name."""
    if table is None:
        table = CONTENT_TYPES
    return table.get(extension_of(value), default)


CONTENT_TYPES = build_table()
