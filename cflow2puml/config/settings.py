"""
Application settings and configuration.

This module contains the settings used throughout the application. Values
can be overridden from the environment or from a ``.env`` file in the
working directory.
"""
import os
import codecs
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()


def read_positive_int_setting(name: str, default: int) -> int:
    """
    Read a positive integer from the environment

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or invalid

    Returns:
        The configured value, or the default
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logger.warning(f"Ignoring {name}={raw!r}: expected a positive integer, using {default}")
        return default
    return value


def read_encoding_setting(name: str, default: str) -> str:
    """
    Read a text encoding name from the environment

    Args:
        name: Environment variable name
        default: Encoding used when the variable is unset or unknown

    Returns:
        The configured encoding, or the default
    """
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        codecs.lookup(raw)
    except LookupError:
        logger.warning(f"Ignoring {name}={raw!r}: unknown encoding, using {default}")
        return default
    return raw


# Spaces per call tree level in cflow output
INDENT_UNIT: int = read_positive_int_setting('CFLOW2PUML_INDENT_UNIT', 4)

# Diagram title used when none is given on the command line
DEFAULT_TITLE: str = os.environ.get('CFLOW2PUML_TITLE', '')

# Encoding of both the cflow input and the PlantUML output
ENCODING: str = read_encoding_setting('CFLOW2PUML_ENCODING', 'utf-8')

LOG_LEVEL: str = os.environ.get('CFLOW2PUML_LOG_LEVEL', 'WARNING')

# Input/output path meaning a standard stream
STDIO_PATH: str = '-'


@dataclass
class ConversionOptions:
    """
    Options for a single cflow to PlantUML conversion.

    Attributes:
        input_paths: cflow output files, read in order. Empty means stdin.
        output_path: Destination file, or None for stdout.
        title: Diagram title; empty for no title line.
        indent_unit: Spaces per call tree level.
        encoding: Text encoding for input and output.
    """
    input_paths: List[str] = field(default_factory=list)
    output_path: Optional[str] = None
    title: str = ''
    indent_unit: int = INDENT_UNIT
    encoding: str = ENCODING

    @classmethod
    def from_env(cls, **overrides) -> 'ConversionOptions':
        """Build options from the environment settings, then apply overrides."""
        options = cls(title=DEFAULT_TITLE, indent_unit=INDENT_UNIT, encoding=ENCODING)
        for key, value in overrides.items():
            if not hasattr(options, key):
                raise ValueError(f"Unknown conversion option: {key}")
            if value is not None:
                setattr(options, key, value)
        return options
