"""Running snippet content through the user's shell."""

from __future__ import annotations

import os
import subprocess


class ShellCommandRunner:
    """Runs a command with `$SHELL -c` (falling back to /bin/sh)."""

    def run(self, command: str) -> int:
        """Run the command and return its exit code; raises OSError if the shell cannot start."""
        shell = os.environ.get("SHELL", "/bin/sh")
        return subprocess.run([shell, "-c", command]).returncode