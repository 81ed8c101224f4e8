"""
awsinfo: EC2 Instance Reporter for Multiple Client Accounts
===========================================================

A small operational tool that lists EC2 instances for a named client
account and summarizes one instance's security groups, reverse DNS and
attached volumes with their snapshot counts.

Modules
-------
core
    Configuration, client registry, filters, models and the AWS client
scanners
    EC2 data collection
reporters
    Output formatters (text, JSON)

Example
-------
>>> from awsinfo.core import AWSClient, load_credentials
>>> from awsinfo.scanners import InstanceScanner
>>>
>>> credential = load_credentials("acme", "/home/ops/.awsinfo/clients")
>>> scanner = InstanceScanner(AWSClient(credential, region="us-east-1"))
>>> for instance in scanner.list_instances():
...     print(instance.instance_id, instance.name)

Notes
-----
Each client is a file in the clients directory containing
``export EC2_ACCESS_KEY="..."`` and ``export EC2_SECRET_ACCESS_KEY="..."``.

See Also
--------
boto3 : AWS SDK for Python
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Public API
from awsinfo.core.aws_client import AWSClient
from awsinfo.core.clients import ClientCredential, list_clients, load_credentials
from awsinfo.core.exceptions import AWSInfoError

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Core
    "AWSClient",
    "AWSInfoError",
    "ClientCredential",
    "list_clients",
    "load_credentials",
]
