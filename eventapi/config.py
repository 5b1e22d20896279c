import configparser
import logging
import os
from dataclasses import dataclass, fields
from typing import Tuple

logger = logging.getLogger(__name__)

CONFIG_NAME: str = "config.ini"
LOG_LEVEL: str = "INFO"

LISTEN_HOST: str = "0.0.0.0"
LISTEN_PORT: int = 8000

PLACEHOLDER = "REPLACE_ME"

# Keys written before the first header, plus anything under [DEFAULT]
_TOP_SECTION = "__root__"
_QUOTES = ('"', "'", "`")


@dataclass
class DatabaseConfig:
    """Connection parameters for the Event database, as stored in the ini file."""
    hostname: str = "127.0.0.1"
    port: int = 3306
    protocol: str = "tcp"
    database: str = PLACEHOLDER
    username: str = PLACEHOLDER
    password: str = PLACEHOLDER


def load(path: str = CONFIG_NAME) -> Tuple[DatabaseConfig, bool]:
    """
    Load the database configuration from an ini file.

    Recognized keys overwrite the defaults, unknown keys are ignored.
    When the file is missing or cannot be parsed, the defaults are written
    to ``path`` and returned with ``found`` set to False.

    Returns:
        Tuple of (config, found)
    """
    config = DatabaseConfig()
    try:
        _read_into(config, path)
    except FileNotFoundError:
        logger.info("No config at %s, writing defaults", path)
    except (OSError, UnicodeDecodeError, configparser.Error, ValueError) as e:
        logger.warning("Could not parse %s (%s), replacing it with defaults", path, e)
    else:
        return config, True

    config = DatabaseConfig()
    save(config, path)
    return config, False


def save(config: DatabaseConfig, path: str = CONFIG_NAME) -> None:
    """Write the configuration as top-level ``key = value`` lines."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        for field in fields(config):
            f.write(f"{field.name} = {_quote(str(getattr(config, field.name)))}\n")


def _read_into(config: DatabaseConfig, path: str) -> None:
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()

    # Repeated keys: the last one wins
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str  # pyright: ignore[reportAttributeAccessIssue]
    parser.read_string(f"[{_TOP_SECTION}]\n{text}", source=path)

    for field in fields(config):
        if not parser.has_option(_TOP_SECTION, field.name):
            continue
        value = _unquote(parser.get(_TOP_SECTION, field.name))
        if field.type is int:
            try:
                setattr(config, field.name, int(value))
            except ValueError:
                logger.warning("Ignoring %s = %r in %s, keeping %s",
                               field.name, value, path, getattr(config, field.name))
        else:
            setattr(config, field.name, value)


def _quote(value: str) -> str:
    if value != value.strip() or value.startswith(_QUOTES):
        return '"' + value + '"'
    return value


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value
