import codecs
import os
from dataclasses import dataclass
from typing import Optional

import toml

from .emitter import DEFAULT_ENCODING
from .errors import ConfigError

CONFIG_FILENAME = "shader-tool.toml"
CONFIG_SECTION = "shader-tool"


@dataclass(frozen=True)
class ToolConfig:
    fragment_suffix: str = ".frag"
    validate: bool = True
    encoding: str = DEFAULT_ENCODING
    path: Optional[str] = None


def config_path_for(source_path: str) -> str:
    """Config lives beside the shader being converted."""
    directory = os.path.dirname(os.path.abspath(source_path))
    return os.path.join(directory, CONFIG_FILENAME)


def _get(section, key, expected_type, default):
    value = section.get(key, default)
    if not isinstance(value, expected_type):
        raise TypeError(
            f"'{key}' must be a {expected_type.__name__}, got {type(value).__name__}"
        )
    return value


def load_config(source_path: str) -> ToolConfig:
    path = config_path_for(source_path)
    if not os.path.exists(path):
        return ToolConfig()

    try:
        data = toml.load(path)
    except toml.TomlDecodeError as e:
        raise ConfigError(path, str(e)) from e

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(path, f"[{CONFIG_SECTION}] must be a table")

    defaults = ToolConfig()
    try:
        config = ToolConfig(
            fragment_suffix=_get(
                section, "fragment-suffix", str, defaults.fragment_suffix
            ),
            validate=_get(section, "validate", bool, defaults.validate),
            encoding=_get(section, "encoding", str, defaults.encoding),
            path=path,
        )
    except TypeError as e:
        raise ConfigError(path, str(e)) from e

    if not config.fragment_suffix:
        raise ConfigError(path, "'fragment-suffix' must not be empty")
    try:
        codecs.lookup(config.encoding)
    except LookupError as e:
        raise ConfigError(path, f"unknown encoding '{config.encoding}'") from e

    return config
