"""Mirror migration orchestrator."""

import os
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from ..config.config import Config
from ..exceptions import CommandError, GitStepError, TempDirError
from ..git.runner import CommandRunner
from ..git.url import build_source_url, parse_repository_name

CLONE_DIR_NAME = 'repo.git'
TEMP_DIR_PREFIX = 'gh2bb-'


@dataclass
class MigrationResult:
    """Result of a completed mirror migration."""

    source_url: str
    destination_url: str
    repository_name: str
    dry_run: bool = False
    commands: List[str] = field(default_factory=list)


class MirrorMigration:
    """Mirror-clones a source repository and mirror-pushes it to a destination."""

    def __init__(self, config: Config, runner: Optional[CommandRunner] = None):
        """Initialize mirror migration.

        Args:
            config: gh2bb configuration
            runner: Command runner, a non dry-run runner if not provided
        """
        self.config = config
        self.runner = runner or CommandRunner()
        self.logger = logger.bind(component='MirrorMigration')

    def migrate(self, dest_url: str) -> MigrationResult:
        """Migrate the repository behind dest_url.

        Args:
            dest_url: SSH URL of the destination repository

        Returns:
            Migration result

        Raises:
            InvalidInputError: If dest_url is not an SSH URL
            ParseError: If no repository name can be found in dest_url
            TempDirError: If the working directory cannot be created
            GitStepError: If a git command fails
        """
        repo_name = parse_repository_name(dest_url)
        source_url = build_source_url(
            repo_name, self.config.prefix, self.config.source_host
        )
        self.logger.info(f'Derived source-url: {source_url}')

        start = len(self.runner.history)
        temp_dir = self._create_temp_directory()
        try:
            clone_dir = os.path.join(temp_dir, CLONE_DIR_NAME)

            self._git_step(
                'clone', 'git clone failed', 'clone', '--mirror', source_url, clone_dir
            )
            self._git_step(
                'set-url',
                'git remote set-url failed',
                'remote',
                'set-url',
                '--push',
                'origin',
                dest_url,
                cwd=clone_dir,
            )
            self._git_step(
                'push', 'git push failed', 'push', '--mirror', 'origin', cwd=clone_dir
            )
        finally:
            self._cleanup_temp_directory(temp_dir)

        self.logger.info(f'✅ Migration completed: {source_url} → {dest_url}')

        return MigrationResult(
            source_url=source_url,
            destination_url=dest_url,
            repository_name=repo_name,
            dry_run=self.runner.dry_run,
            commands=self.runner.history[start:],
        )

    def _git_step(
        self, stage: str, failure: str, *args: str, cwd: Optional[str] = None
    ) -> None:
        try:
            self.runner.run(self.config.git.executable, *args, cwd=cwd)
        except CommandError as e:
            raise GitStepError(f'{failure}: {e}', stage=stage) from e

    def _create_temp_directory(self) -> str:
        """Create temporary directory for the mirror clone.

        Returns:
            Path to temporary directory
        """
        try:
            if self.config.git.temp_dir:
                os.makedirs(self.config.git.temp_dir, exist_ok=True)
            temp_dir = tempfile.mkdtemp(
                prefix=TEMP_DIR_PREFIX, dir=self.config.git.temp_dir
            )
        except OSError as e:
            raise TempDirError(f'creating temp dir: {e}') from e

        self.logger.debug(f'Created temporary directory: {temp_dir}')
        return temp_dir

    def _cleanup_temp_directory(self, temp_path: str) -> None:
        """Clean up temporary directory.

        Args:
            temp_path: Path to temporary directory
        """
        try:
            if os.path.exists(temp_path):
                shutil.rmtree(temp_path)
                self.logger.debug(f'Cleaned up temporary directory: {temp_path}')
        except OSError as e:
            self.logger.warning(
                f'Failed to cleanup temporary directory {temp_path}: {e}'
            )


def migrate_repository(
    dest_url: str, config: Config, runner: Optional[CommandRunner] = None
) -> MigrationResult:
    """Migrate the repository behind dest_url using config."""
    return MirrorMigration(config, runner).migrate(dest_url)
