import logging
from collections.abc import Mapping
from pathlib import Path

import marshmallow
import yaml
from marshmallow import EXCLUDE, fields, post_load

from .exceptions import ConfigurationError
from .statics import DEFAULT_INDEX

logger = logging.getLogger(__name__)


class CacheDirective(fields.Field):
    """A ``cache_control`` value: seconds, ``False`` or a literal header."""

    default_error_messages = {"invalid": "Must be an integer, false or a string."}

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            if value < 0:
                raise self.make_error("invalid")
            return value
        if isinstance(value, str):
            return value
        raise self.make_error("invalid")


class ConfigSchema(marshmallow.Schema):
    class Meta:
        unknown = EXCLUDE

    root = fields.String(load_default=".")
    index = fields.String(load_default=DEFAULT_INDEX)
    error_page = fields.String(load_default=None, allow_none=True)
    error_page_override = fields.String(
        data_key="errorPage", load_default=None, allow_none=True
    )
    cache_control = fields.Dict(
        keys=fields.String(), values=CacheDirective(), load_default=dict
    )

    @post_load
    def make_config(self, data, **kwargs):
        return Config(**data)


class Config:
    """Site configuration, read-only for the duration of a request.

    :param root: Directory files are served from.
    :param cache_control: Mapping of request paths to cache directives.
    :param error_page: Site-root-relative path of the 404 page.
    :param index: File a directory path resolves to.
    :param error_page_override: Filesystem path of a 404 page taking
                                precedence over ``error_page`` (``errorPage``
                                in config files).
    """

    __slots__ = [
        "root",
        "cache_control",
        "error_page",
        "index",
        "error_page_override",
    ]

    def __init__(
        self,
        root=".",
        cache_control=None,
        error_page=None,
        index=DEFAULT_INDEX,
        error_page_override=None,
    ):
        self.root = root
        self.cache_control = dict(cache_control or {})
        self.error_page = error_page
        self.index = index
        self.error_page_override = error_page_override

    def __repr__(self):
        return f"<Config root={self.root!r}>"

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return all(getattr(self, key) == getattr(other, key) for key in self.__slots__)

    def replace(self, **changes):
        values = {key: getattr(self, key) for key in self.__slots__}
        values.update(changes)
        return Config(**values)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Config":
        try:
            return ConfigSchema().load(dict(data))
        except marshmallow.ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.messages}", messages=e.messages
            ) from e

    @classmethod
    def load(cls, path) -> "Config":
        """Reads a YAML or JSON config file."""
        path = Path(path)
        logger.debug(f"Loading configuration from {path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Unable to read {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Unable to parse {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a mapping")
        return cls.from_mapping(data)


def coerce_config(value) -> Config:
    """Turns whatever was handed to the server into a :class:`Config`.

    Accepts a ``Config``, a mapping, a file path, or a callable returning
    any of those (called again for every request, so reloaded configuration
    is picked up).
    """
    if callable(value):
        value = value()
    if value is None:
        return Config()
    if isinstance(value, Config):
        return value
    if isinstance(value, (str, Path)):
        return Config.load(value)
    if isinstance(value, Mapping):
        return Config.from_mapping(value)
    raise TypeError(f"Invalid 'config' argument: {value!r}")
