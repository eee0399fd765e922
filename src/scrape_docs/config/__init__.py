"""Configuration management module."""

from .constants import DEFAULTS, APP, PATTERNS
from .argument_parser import parse_arguments

__all__ = ['DEFAULTS', 'APP', 'PATTERNS', 'parse_arguments']
