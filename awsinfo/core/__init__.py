"""
Core Components
===============

- :class:`Settings` - Immutable run configuration
- :func:`list_clients` / :func:`load_credentials` - Client registry
- :func:`classify` - Instance filter classification
- :class:`AWSClient` - boto3 session and client management
- :class:`DigResolver` - Reverse DNS lookups
- Data models and the exception hierarchy
"""

from awsinfo.core.aws_client import AWSClient
from awsinfo.core.clients import ClientCredential, list_clients, load_credentials
from awsinfo.core.config import Settings
from awsinfo.core.dns import DigResolver, ReverseDnsResolver
from awsinfo.core.exceptions import (
    ApiCallError,
    AWSClientError,
    AWSInfoError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    CredentialsError,
    NoMatchingInstancesError,
)
from awsinfo.core.filters import FilterKind, InstanceFilter, classify
from awsinfo.core.models import DiskInfo, InstanceDetail, InstanceSummary

__all__ = [
    # Configuration
    "Settings",
    # Client registry
    "ClientCredential",
    "list_clients",
    "load_credentials",
    # Filters
    "FilterKind",
    "InstanceFilter",
    "classify",
    # AWS access
    "AWSClient",
    "DigResolver",
    "ReverseDnsResolver",
    # Models
    "InstanceSummary",
    "InstanceDetail",
    "DiskInfo",
    # Exceptions
    "AWSInfoError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "AWSClientError",
    "CredentialsError",
    "ApiCallError",
    "NoMatchingInstancesError",
]
