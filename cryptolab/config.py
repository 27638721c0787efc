"""
Configuration

Default cipher parameters and the settings the command line front-end reads
from the environment. The library functions never consult the environment
themselves; settings are passed in explicitly.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .codec.conversions import TextEncoding
from .codec.padding import PaddingPolicy

# Sizes in bytes
FEISTEL_DEFAULT_PARAMS = {
    'block_size': 8,
    'key_size': 8,
    'num_rounds': 16,
}

SPN_DEFAULT_PARAMS = {
    'block_size': 16,
    'key_size': 16,
    'num_rounds': 10,
}

ENV_PADDING_POLICY = 'CRYPTOLAB_PADDING_POLICY'
ENV_TEXT_ENCODING = 'CRYPTOLAB_TEXT_ENCODING'
ENV_LOG_LEVEL = 'CRYPTOLAB_LOG_LEVEL'


@dataclass
class Settings:
    """Runtime settings for message encryption."""
    padding_policy: PaddingPolicy = PaddingPolicy.LENIENT
    text_encoding: TextEncoding = TextEncoding.LATIN1
    log_level: str = 'WARNING'


def _parse_enum(enum_cls, value: str, variable: str):
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        choices = ', '.join(member.value for member in enum_cls)
        raise ValueError(f"{variable} must be one of: {choices} (got {value!r})")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        environ: Mapping to read from (os.environ if None)

    Returns:
        The resulting Settings; unset variables keep their defaults
    """
    if environ is None:
        environ = os.environ

    settings = Settings()

    if environ.get(ENV_PADDING_POLICY):
        settings.padding_policy = _parse_enum(
            PaddingPolicy, environ[ENV_PADDING_POLICY], ENV_PADDING_POLICY)

    if environ.get(ENV_TEXT_ENCODING):
        settings.text_encoding = _parse_enum(
            TextEncoding, environ[ENV_TEXT_ENCODING], ENV_TEXT_ENCODING)

    if environ.get(ENV_LOG_LEVEL):
        level = environ[ENV_LOG_LEVEL].strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"{ENV_LOG_LEVEL} is not a valid log level (got {level!r})")
        settings.log_level = level

    return settings
