"""Destination URL parsing and source URL derivation."""

import re

from ..exceptions import InvalidInputError, ParseError

SSH_PREFIXES = ('git@', 'ssh://')

# Last two segments split on ':' or '/': workspace (ignored) and repository,
# with an optional trailing '.git' dropped from the repository.
REPOSITORY_PATTERN = re.compile(r'[:/][^/]+/(?P<repo>[^/]+?)(?:\.git)?\Z')


def parse_repository_name(dest_url: str) -> str:
    """Extract the repository name from an SSH destination URL.

    Args:
        dest_url: Destination URL, e.g. git@bitbucket.org:workspace/repo.git

    Returns:
        Repository name, exactly as written in the URL

    Raises:
        InvalidInputError: If the URL is not an SSH URL
        ParseError: If no repository name can be found
    """
    if not dest_url.startswith(SSH_PREFIXES):
        raise InvalidInputError(
            'dest-url must be SSH (e.g. git@bitbucket.org:workspace/name-of-the-repo.git)'
        )

    match = REPOSITORY_PATTERN.search(dest_url)
    if match is None:
        raise ParseError('could not parse repository name from dest-url')

    return match.group('repo')


def derive_source_url(
    dest_url: str, prefix: str, source_host: str = 'github.com'
) -> str:
    """Build the SSH URL of the repository to mirror from.

    Args:
        dest_url: SSH destination URL
        prefix: Namespace (user or organization) on the source host
        source_host: Source SSH host

    Returns:
        Source URL of the form git@<host>:<prefix>/<repo>.git
    """
    return build_source_url(parse_repository_name(dest_url), prefix, source_host)


def build_source_url(
    repo_name: str, prefix: str, source_host: str = 'github.com'
) -> str:
    """Build the source URL for an already extracted repository name."""
    return f'git@{source_host}:{prefix}/{repo_name}.git'
