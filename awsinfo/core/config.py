"""
Configuration Module
====================

Holds the immutable run settings for a single awsinfo invocation.

Settings are built once from CLI options with environment variable
fallbacks and then passed explicitly to each component; nothing reads
option state from globals.

Environment Variables
---------------------
AWSINFO_CLIENTS_DIR
    Directory holding one credential file per client.
AWSINFO_REGION
    AWS region to query.
AWSINFO_DIG
    Path to the ``dig`` executable used for reverse DNS lookups.

Example
-------
>>> settings = Settings.from_options(client="acme", filter_text="web-01")
>>> settings.clients_dir
PosixPath('/home/ops/.awsinfo/clients')
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

DEFAULT_CLIENTS_DIR = "~/.awsinfo/clients"
DEFAULT_REGION = "us-east-1"
DEFAULT_DIG_COMMAND = "dig"
DEFAULT_DNS_TIMEOUT = 5
DEFAULT_API_TIMEOUT = 30
# A single attempt: EC2 calls are not retried unless asked for
DEFAULT_MAX_ATTEMPTS = 1

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Settings:
    """
    Immutable settings for one run.

    Attributes
    ----------
    clients_dir : Path
        Directory holding the client credential files.
    client : str or None
        Selected client name.
    filter_text : str or None
        Raw instance filter; ``None`` selects the summary report.
    list_clients : bool
        Whether to list clients instead of reporting.
    region : str
        AWS region to query.
    output_format : str
        ``"text"`` or ``"json"``.
    output_path : str or None
        Where JSON output is written; stdout when ``None``.
    log_level : str
        Root logging level.
    log_file : str or None
        Optional log file.
    dig_command : str
        Executable used for reverse DNS lookups.
    dns_timeout : int
        Seconds to wait for a reverse DNS lookup.
    api_timeout : int
        Connect and read timeout for EC2 calls, in seconds.
    max_attempts : int
        Total attempts per EC2 call (1 disables retries).
    """

    clients_dir: Path
    client: Optional[str] = None
    filter_text: Optional[str] = None
    list_clients: bool = False
    region: str = DEFAULT_REGION
    output_format: str = "text"
    output_path: Optional[str] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None
    dig_command: str = DEFAULT_DIG_COMMAND
    dns_timeout: int = DEFAULT_DNS_TIMEOUT
    api_timeout: int = DEFAULT_API_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, "
                f"got {self.output_format!r}"
            )
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @property
    def is_detail(self) -> bool:
        """True when a filter was given and a single-instance report is wanted."""
        return self.filter_text is not None

    @classmethod
    def from_options(
        cls,
        clients_dir: Optional[str] = None,
        region: Optional[str] = None,
        dig_command: Optional[str] = None,
        **options: Any,
    ) -> Settings:
        """
        Build settings from CLI option values.

        Options left as ``None`` fall back to environment variables and
        then to module defaults.

        Parameters
        ----------
        clients_dir : str, optional
            Overrides ``AWSINFO_CLIENTS_DIR``.
        region : str, optional
            Overrides ``AWSINFO_REGION``.
        dig_command : str, optional
            Overrides ``AWSINFO_DIG``.
        **options
            Remaining ``Settings`` fields. ``None`` values are dropped so
            field defaults apply.

        Returns
        -------
        Settings
            The frozen settings.
        """
        base = clients_dir or os.environ.get("AWSINFO_CLIENTS_DIR") or DEFAULT_CLIENTS_DIR
        values = {key: value for key, value in options.items() if value is not None}
        return cls(
            clients_dir=Path(base).expanduser(),
            region=region or os.environ.get("AWSINFO_REGION") or DEFAULT_REGION,
            dig_command=dig_command or os.environ.get("AWSINFO_DIG") or DEFAULT_DIG_COMMAND,
            **values,
        )
