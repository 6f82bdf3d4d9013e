"""External command execution."""

import shlex
import subprocess
from typing import List, Optional

from loguru import logger

from ..exceptions import CommandError


class CommandRunner:
    """Runs external programs, or only logs them in dry-run mode."""

    def __init__(self, dry_run: bool = False):
        """Initialize command runner.

        Args:
            dry_run: Log commands without executing them
        """
        self.dry_run = dry_run
        self.history: List[str] = []
        self.logger = logger.bind(component='CommandRunner')

    def run(self, program: str, *args: str, cwd: Optional[str] = None) -> None:
        """Run a program and wait for it to finish.

        The child inherits this process's stdout and stderr, so its output
        shows up as it is produced.

        Args:
            program: Executable name, looked up on PATH
            *args: Arguments passed to the program
            cwd: Working directory; current directory when empty

        Raises:
            CommandError: If the program exits non-zero or cannot be started
        """
        cmd = [program, *args]
        cmd_str = shlex.join(cmd)
        self.history.append(cmd_str)

        self.logger.info(f'→ {cmd_str}')
        if cwd:
            self.logger.debug(f'Working directory: {cwd}')

        if self.dry_run:
            return

        try:
            subprocess.run(cmd, cwd=cwd or None, check=True)
        except subprocess.CalledProcessError as e:
            raise CommandError(
                f'{cmd_str} exited with status {e.returncode}',
                command=cmd,
                returncode=e.returncode,
            ) from e
        except OSError as e:
            raise CommandError(f'could not start {program}: {e}', command=cmd) from e
