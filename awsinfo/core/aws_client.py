"""
AWS Client Module
=================

Provides a wrapper around boto3 that builds a session from a client's
stored access keys and hands out cached service clients configured with
timeouts and an explicit retry policy.

Classes
-------
AWSClient
    Main client class for AWS operations.

Example
-------
>>> from awsinfo.core.aws_client import AWSClient
>>> from awsinfo.core.clients import load_credentials
>>>
>>> credential = load_credentials("acme", "/home/ops/.awsinfo/clients")
>>> client = AWSClient(credential, region="us-east-1")
>>> ec2 = client.get_ec2_client()

Notes
-----
Sessions and service clients are created lazily on first access and
cached for the lifetime of the ``AWSClient``.

See Also
--------
boto3 : AWS SDK for Python
botocore : Low-level AWS client library
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import NoRegionError

from awsinfo.core.clients import ClientCredential
from awsinfo.core.exceptions import AWSClientError, CredentialsError

# Module logger
logger = logging.getLogger(__name__)


class AWSClient:
    """
    AWS client wrapper bound to one client's credentials.

    Parameters
    ----------
    credential : ClientCredential, optional
        Access key pair to sign requests with. When ``None`` the default
        boto3 credential chain is used.
    region : str, default="us-east-1"
        AWS region to connect to.
    max_attempts : int, default=1
        Total attempts per API call. ``1`` disables retries.
    timeout : int, default=30
        Connect and read timeout in seconds.

    Attributes
    ----------
    region : str
        The configured AWS region.
    max_attempts : int
        Total attempts per API call.
    timeout : int
        Request timeout in seconds.

    Raises
    ------
    CredentialsError
        If a session cannot be built from the credential.
    AWSClientError
        If a service client cannot be created.
    """

    def __init__(
        self,
        credential: Optional[ClientCredential] = None,
        region: str = "us-east-1",
        max_attempts: int = 1,
        timeout: int = 30,
    ) -> None:
        """Initialize AWS client with the specified configuration."""
        self.credential = credential
        self.region = region
        self.max_attempts = max_attempts
        self.timeout = timeout

        # Lazy-loaded components
        self._session: Optional[boto3.Session] = None
        self._clients: dict[str, Any] = {}

        self._config = self._create_config()

        logger.debug(f"Initialized AWSClient for {region}")

    def _create_config(self) -> Config:
        """
        Create boto3 configuration with retry and timeout settings.

        Returns
        -------
        Config
            Boto3 configuration object.
        """
        return Config(
            retries={
                "total_max_attempts": self.max_attempts,
                "mode": "standard",
            },
            connect_timeout=self.timeout,
            read_timeout=self.timeout,
        )

    @property
    def session(self) -> boto3.Session:
        """Get or create the boto3 session (lazy initialization)."""
        if self._session is None:
            self._session = self._create_session()
        return self._session

    def _create_session(self) -> boto3.Session:
        """
        Create a boto3 session from the stored credential.

        Raises
        ------
        CredentialsError
            If the session cannot be created.
        """
        session_kwargs = {"region_name": self.region}
        if self.credential is not None:
            session_kwargs["aws_access_key_id"] = self.credential.access_key
            session_kwargs["aws_secret_access_key"] = self.credential.secret_key

        try:
            session = boto3.Session(**session_kwargs)
        except Exception as e:
            logger.exception("Failed to create AWS session")
            raise CredentialsError(
                f"Failed to create AWS session: {e}",
                region=self.region,
            )

        logger.debug(f"Created boto3 session for region {self.region}")
        return session

    def _get_client(self, service_name: str) -> Any:
        """
        Get or create a cached boto3 client for a service.

        Raises
        ------
        AWSClientError
            If the client cannot be created.
        """
        if service_name in self._clients:
            return self._clients[service_name]

        try:
            client = self.session.client(service_name, config=self._config)
        except NoRegionError:
            raise AWSClientError(
                f"Invalid or missing region: {self.region}",
                service=service_name,
                region=self.region,
            )
        except CredentialsError:
            raise
        except Exception as e:
            logger.exception(f"Failed to create {service_name} client")
            raise AWSClientError(
                f"Failed to create {service_name} client: {e}",
                service=service_name,
                region=self.region,
            )

        self._clients[service_name] = client
        logger.debug(f"Created {service_name} client for {self.region}")
        return client

    def get_ec2_client(self) -> Any:
        """
        Get the EC2 client.

        Returns
        -------
        EC2.Client
            Boto3 EC2 client.
        """
        return self._get_client("ec2")

    def __enter__(self) -> AWSClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager and drop cached clients."""
        self._clients.clear()
        self._session = None

    def __repr__(self) -> str:
        """Return string representation of the client."""
        return (
            f"AWSClient(region='{self.region}', "
            f"credential={self.credential!r}, "
            f"max_attempts={self.max_attempts})"
        )
