"""
Start the application when no window can be activated
"""
import os
import shlex
import shutil
import subprocess
import sys
from typing import Sequence

import click

from .errors import CommandNotFound

class Launcher:
    """Spawns a command detached, or replaces the current process with it"""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def launch(self, command: str, args: Sequence[str] = (), fork: bool = True) -> None:
        """
        Run command with args

        Args:
            command: Program name or path
            args: Extra arguments
            fork: Start detached and return immediately; when False the
                  current process is replaced and this never returns

        Raises:
            CommandNotFound: If command is not executable
        """
        if shutil.which(command) is None:
            raise CommandNotFound(f"unable to find command '{command}'")

        argv = [command, *args]
        if not self.quiet:
            click.secho(f"Launching: {shlex.join(argv)}", fg="green")

        if not fork:
            # exec discards anything still buffered
            sys.stdout.flush()
            os.execvp(command, argv)

        subprocess.Popen(argv, start_new_session=True, stdin=subprocess.DEVNULL,
                         stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
