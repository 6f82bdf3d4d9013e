"""Git URL handling and command execution."""

from .runner import CommandRunner
from .url import build_source_url, derive_source_url, parse_repository_name

__all__ = [
    'CommandRunner',
    'build_source_url',
    'derive_source_url',
    'parse_repository_name',
]
