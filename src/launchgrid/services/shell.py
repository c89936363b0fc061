"""Shell command execution for OS-level media and volume tools."""

import logging
import subprocess
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0


class CommandRunner(Protocol):
    """Runs an external command and returns its standard output."""

    def run(self, args: Sequence[str]) -> str:
        """
        Run a command.

        Returns:
            Decoded stdout, or "" if the command could not be run
        """
        ...


class ShellCommandRunner:
    """CommandRunner backed by subprocess, never raising on tool failure."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    def run(self, args: Sequence[str]) -> str:
        try:
            result = subprocess.run(
                list(args),
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"{args[0]} timed out")
            return ""
        except FileNotFoundError:
            logger.warning(f"{args[0]} not found")
            return ""
        except OSError as e:
            logger.warning(f"{args[0]} failed: {e}")
            return ""

        if result.returncode != 0:
            logger.debug(f"{' '.join(args)} exited with {result.returncode}: {result.stderr.strip()}")
        return result.stdout
