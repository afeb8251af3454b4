import logging

from .statics import DEFAULT_CACHE_CONTROL, NO_CACHE

logger = logging.getLogger(__name__)


def _lookup(path, table):
    if path in table:
        return True, table[path]
    # Config files usually write paths relative to the site root.
    relative = path.lstrip("/")
    if relative != path and relative in table:
        return True, table[relative]
    return False, None


def resolve_cache_control(path, table=None, default=DEFAULT_CACHE_CONTROL):
    """Returns the ``Cache-Control`` header value for a requested path.

    :param path: The path as requested, e.g. ``/index.html``.
    :param table: Mapping of paths to a number of seconds, ``False`` or a
                  literal header value.
    """
    found, value = _lookup(path, table or {})
    if not found:
        return default

    # bool is an int subclass; check it first.
    if isinstance(value, bool):
        return NO_CACHE if value is False else default
    if isinstance(value, int):
        if value < 0:
            logger.warning(f"Negative max-age for {path!r} in cache_control: {value}")
            return default
        return f"public, max-age={value}"
    if isinstance(value, str):
        return value

    logger.warning(f"Unsupported cache_control value for {path!r}: {value!r}")
    return default


def apply_cache_control(request, responder):
    config = request.config
    table = config.cache_control if config is not None else None
    responder.set("Cache-Control", resolve_cache_control(request.path, table))
    return responder
