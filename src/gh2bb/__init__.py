"""gh2bb

Migrate a single GitHub repository to another host (e.g. Bitbucket) by
mirror-cloning it and mirror-pushing it over SSH.
"""

__version__ = '0.1.0'

from .cli import main

__all__ = ['main']
