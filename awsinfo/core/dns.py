"""
Reverse DNS Lookup
==================

A narrow lookup interface, ``lookup(ip) -> hostname or None``, and an
implementation that shells out to ``dig +short -x``. Lookups never raise;
any failure is logged and reported as ``None``.
"""

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional, Protocol

# Module logger
logger = logging.getLogger(__name__)


class ReverseDnsResolver(Protocol):
    """Anything that can map an IP address to a hostname."""

    def lookup(self, ip: str) -> Optional[str]:
        ...


class DigResolver:
    """
    Reverse DNS resolver backed by the ``dig`` utility.

    Parameters
    ----------
    command : str, default="dig"
        The ``dig`` executable.
    timeout : int, default=5
        Seconds to wait for ``dig`` to finish.
    """

    def __init__(self, command: str = "dig", timeout: int = 5) -> None:
        self.command = command
        self.timeout = timeout

    def build_command(self, ip: str) -> List[str]:
        return [self.command, "+short", "-x", ip]

    def lookup(self, ip: str) -> Optional[str]:
        """
        Return the first PTR record for ``ip``.

        Returns
        -------
        str or None
            The hostname, or ``None`` if ``dig`` is unavailable, fails,
            times out or prints nothing.
        """
        try:
            result = subprocess.run(
                self.build_command(ip),
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError:
            logger.warning(f"Reverse DNS skipped: {self.command} not found")
            return None
        except subprocess.TimeoutExpired:
            logger.warning(f"Reverse DNS lookup for {ip} timed out after {self.timeout}s")
            return None

        if result.returncode != 0:
            logger.warning(
                f"Reverse DNS lookup for {ip} failed (exit {result.returncode}): "
                f"{result.stderr.strip()}"
            )
            return None

        for line in result.stdout.splitlines():
            if line.strip():
                return line.strip()
        return None

    def __repr__(self) -> str:
        return f"DigResolver(command={self.command!r}, timeout={self.timeout})"
