"""
Client Registry
===============

Resolves client names to EC2 credentials.

Each client is a file in the clients directory whose name is the client
name. The file holds shell ``export`` lines; only two variables are used::

    export EC2_ACCESS_KEY="AKIA..."
    export EC2_SECRET_ACCESS_KEY="..."

Quotes around the values are optional.

Functions
---------
list_clients
    List the client names available in a directory.
load_credentials
    Read a client's credential file into a ``ClientCredential``.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

from awsinfo.core.exceptions import ConfigNotFoundError, ConfigParseError

# Module logger
logger = logging.getLogger(__name__)

ACCESS_KEY_VAR = "EC2_ACCESS_KEY"
SECRET_KEY_VAR = "EC2_SECRET_ACCESS_KEY"

# export NAME="value" with optional quotes; value capture is non-greedy
EXPORT_LINE = re.compile(r'^\s*export\s+(\w+)="?(.*?)"?\s*$')


@dataclass(frozen=True)
class ClientCredential:
    """
    Access key pair for one client.

    Attributes
    ----------
    access_key : str
        EC2 access key id.
    secret_key : str
        EC2 secret access key.
    """

    access_key: str
    secret_key: str

    def __repr__(self) -> str:
        """Return string representation with the secret masked."""
        return f"ClientCredential(access_key={self.access_key!r}, secret_key='****')"


def list_clients(clients_dir: Union[str, Path]) -> List[str]:
    """
    List client names in the clients directory.

    Parameters
    ----------
    clients_dir : str or Path
        Directory holding one credential file per client.

    Returns
    -------
    list of str
        Entry names in directory order, without ``.`` and ``..``. Empty
        if the directory cannot be read.
    """
    try:
        with os.scandir(clients_dir) as entries:
            names = [entry.name for entry in entries if entry.name not in (".", "..")]
    except OSError as e:
        logger.warning(f"Unable to read clients directory {clients_dir}: {e}")
        return []

    logger.debug(f"Found {len(names)} clients in {clients_dir}")
    return names


def _client_path(client_name: str, clients_dir: Union[str, Path]) -> Path:
    """Map a client name to its file, refusing names that leave the directory."""
    if (
        not client_name
        or client_name in (".", "..")
        or "/" in client_name
        or os.sep in client_name
    ):
        raise ConfigNotFoundError(
            f"Invalid client name {client_name!r}",
            client=client_name,
        )
    return Path(clients_dir) / client_name


def _parse_exports(lines) -> Dict[str, str]:
    exports: Dict[str, str] = {}
    for line in lines:
        match = EXPORT_LINE.match(line)
        if match:
            exports[match.group(1)] = match.group(2)
    return exports


def load_credentials(client_name: str, clients_dir: Union[str, Path]) -> ClientCredential:
    """
    Load a client's EC2 credentials from its file.

    Parameters
    ----------
    client_name : str
        Client name; also the file name inside ``clients_dir``.
    clients_dir : str or Path
        Directory holding the credential files.

    Returns
    -------
    ClientCredential
        The client's access key pair.

    Raises
    ------
    ConfigNotFoundError
        If the file cannot be opened.
    ConfigParseError
        If either ``EC2_ACCESS_KEY`` or ``EC2_SECRET_ACCESS_KEY`` is missing.

    Example
    -------
    >>> credential = load_credentials("acme", "/home/ops/.awsinfo/clients")
    >>> credential.access_key
    'AKIAEXAMPLE'
    """
    path = _client_path(client_name, clients_dir)

    try:
        with open(path, "r", encoding="utf-8") as f:
            exports = _parse_exports(f)
    except OSError as e:
        raise ConfigNotFoundError(
            f"Unable to open config file for client '{client_name}': {e.strerror or e}",
            client=client_name,
            path=str(path),
        )

    missing = [name for name in (ACCESS_KEY_VAR, SECRET_KEY_VAR) if not exports.get(name)]
    if missing:
        raise ConfigParseError(
            f"Could not find {' and '.join(missing)} in config file for client '{client_name}'",
            client=client_name,
            path=str(path),
            details={"missing": missing},
        )

    logger.debug(f"Loaded credentials for client {client_name}")
    return ClientCredential(
        access_key=exports[ACCESS_KEY_VAR],
        secret_key=exports[SECRET_KEY_VAR],
    )
