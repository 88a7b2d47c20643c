"""
Running process lookup by program name

Two strategies exist because the preferred tool is not always installed.
They do not match identically:

- PgrepMatcher matches the program name on a word boundary anywhere in the
  full command line, after a path separator or at its start.
- PsPrefixMatcher compares the kernel's recorded command name, which is
  truncated to 15 characters, against the same-length prefix of the name.
  Programs started through an interpreter or a wrapper script are missed.
"""
import os
import re
import shutil
import subprocess
from typing import FrozenSet

from .errors import ToolUnavailable

# Length of the kernel's comm field, excluding the terminating NUL
COMM_LENGTH = 15

class ProcessMatcher:
    """Finds process ids whose program identity matches a name"""

    def find_pids(self, name: str) -> FrozenSet[int]:
        raise NotImplementedError

class PgrepMatcher(ProcessMatcher):
    """Full command line regex match via pgrep"""

    tool = "pgrep"

    @staticmethod
    def pattern(name: str) -> str:
        return rf"(^|/){re.escape(name)}(\s|$)"

    def find_pids(self, name: str) -> FrozenSet[int]:
        """
        Run pgrep against the full command line

        Returns:
            Set of matching pids, excluding this process

        Raises:
            ToolUnavailable: If pgrep fails for any reason other than no match
        """
        try:
            result = subprocess.run([self.tool, '-f', self.pattern(name)],
                                    capture_output=True, text=True, check=False)
        except FileNotFoundError:
            raise ToolUnavailable(f"unable to find {self.tool}")

        # pgrep exits 1 when nothing matched
        if result.returncode == 1:
            return frozenset()
        if result.returncode != 0:
            raise ToolUnavailable(f"{self.tool} failed: {result.stderr.strip()}")

        pids = set()
        for line in result.stdout.split():
            if line.isdigit():
                pids.add(int(line))
        pids.discard(os.getpid())
        return frozenset(pids)

class PsPrefixMatcher(ProcessMatcher):
    """Fallback scan of every process's truncated command name"""

    tool = "ps"

    def find_pids(self, name: str) -> FrozenSet[int]:
        try:
            result = subprocess.run([self.tool, '-e', '-o', 'pid=,comm='],
                                    capture_output=True, text=True, check=False)
        except FileNotFoundError:
            raise ToolUnavailable(f"unable to find {self.tool}")
        if result.returncode != 0:
            raise ToolUnavailable(f"{self.tool} failed: {result.stderr.strip()}")

        prefix = name[:COMM_LENGTH]
        pids = set()
        for line in result.stdout.splitlines():
            parts = line.strip().split(None, 1)
            if len(parts) != 2 or not parts[0].isdigit():
                continue
            if parts[1].strip() == prefix:
                pids.add(int(parts[0]))
        pids.discard(os.getpid())
        return frozenset(pids)

def select_process_matcher() -> ProcessMatcher:
    """
    Pick the strongest matcher available on this system

    Raises:
        ToolUnavailable: If neither pgrep nor ps is installed
    """
    if shutil.which(PgrepMatcher.tool):
        return PgrepMatcher()
    if shutil.which(PsPrefixMatcher.tool):
        return PsPrefixMatcher()
    raise ToolUnavailable("unable to find pgrep or ps")
