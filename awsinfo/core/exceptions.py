"""
Custom Exceptions for awsinfo
=============================

This module defines the exception hierarchy used throughout the
application. Every exception carries the process exit code the CLI
should terminate with, so a single top-level handler can map failures
to exit statuses.

Exception Hierarchy
-------------------
::

    AWSInfoError (base, exit 1)
    ├── ConfigError (exit 2)
    │   ├── ConfigNotFoundError
    │   └── ConfigParseError
    ├── AWSClientError (exit 1)
    │   ├── CredentialsError
    │   └── ApiCallError
    └── NoMatchingInstancesError (exit 0)

Example
-------
>>> from awsinfo.core.exceptions import ConfigError, ApiCallError
>>>
>>> try:
...     credential = load_credentials("acme", clients_dir)
... except ConfigError as e:
...     print(f"Bad client config: {e}")
...     raise SystemExit(e.exit_code)
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AWSInfoError(Exception):
    """
    Base exception for all awsinfo errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    details : dict, optional
        Additional context about the error.

    Attributes
    ----------
    message : str
        The error message.
    details : dict
        Additional error details.
    exit_code : int
        Process exit status associated with this kind of error.
    """

    exit_code = 1

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for serialization.

        Returns
        -------
        dict
            Dictionary representation of the error.
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "exit_code": self.exit_code,
        }


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(AWSInfoError):
    """
    Base exception for client configuration errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    client : str, optional
        The client name whose configuration failed.
    path : str, optional
        The credential file involved.
    details : dict, optional
        Additional context about the error.
    """

    exit_code = 2

    def __init__(
        self,
        message: str,
        client: Optional[str] = None,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.client = client
        self.path = path
        full_details = details or {}
        if client:
            full_details["client"] = client
        if path:
            full_details["path"] = path
        super().__init__(message, full_details)


class ConfigNotFoundError(ConfigError):
    """
    Raised when a client's credential file cannot be opened.

    Example
    -------
    >>> raise ConfigNotFoundError(
    ...     "Unable to open config file for client 'acme'",
    ...     client="acme",
    ...     path="/home/ops/.awsinfo/clients/acme",
    ... )
    """

    pass


class ConfigParseError(ConfigError):
    """
    Raised when a credential file lacks the access key or secret key.

    Example
    -------
    >>> raise ConfigParseError(
    ...     "Could not find EC2_SECRET_ACCESS_KEY",
    ...     client="acme",
    ...     details={"missing": ["EC2_SECRET_ACCESS_KEY"]},
    ... )
    """

    pass


# =============================================================================
# AWS Client Exceptions
# =============================================================================


class AWSClientError(AWSInfoError):
    """
    Base exception for AWS client-related errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    service : str, optional
        The AWS service that caused the error.
    region : str, optional
        The AWS region where the error occurred.
    details : dict, optional
        Additional context about the error.
    """

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        region: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.service = service
        self.region = region
        full_details = details or {}
        if service:
            full_details["service"] = service
        if region:
            full_details["region"] = region
        super().__init__(message, full_details)


class CredentialsError(AWSClientError):
    """Raised when a session cannot be built from the client's credentials."""

    pass


class ApiCallError(AWSClientError):
    """
    Raised when an EC2 API call returns an error response.

    Parameters
    ----------
    message : str
        Human-readable error message.
    operation : str
        The API operation that failed (e.g. ``describe_instances``).
    error_code : str, optional
        The provider's error code, when one was returned.
    provider_message : str, optional
        The provider's error message, when one was returned.

    Example
    -------
    >>> raise ApiCallError(
    ...     "describe_instances failed",
    ...     operation="describe_instances",
    ...     error_code="AuthFailure",
    ... )
    """

    def __init__(
        self,
        message: str,
        operation: str,
        error_code: Optional[str] = None,
        provider_message: Optional[str] = None,
        service: Optional[str] = "ec2",
        region: Optional[str] = None,
    ) -> None:
        self.operation = operation
        self.error_code = error_code
        self.provider_message = provider_message
        details: Dict[str, Any] = {"operation": operation}
        if error_code:
            details["error_code"] = error_code
        super().__init__(message, service=service, region=region, details=details)


# =============================================================================
# Informational
# =============================================================================


class NoMatchingInstancesError(AWSInfoError):
    """
    Raised when an instance filter matches nothing.

    This is not a failure: the CLI reports it at INFO level and exits 0.
    """

    exit_code = 0

    def __init__(self, filter_description: str) -> None:
        self.filter_description = filter_description
        super().__init__(f"No instances matched filter {filter_description}")
