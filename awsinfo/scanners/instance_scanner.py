"""
Instance Scanner Module
=======================

Fetches EC2 instance data and decodes it into the typed models used by
the reporters.

Two reports are supported:

- **Summary** - every instance in the region, in the order EC2 returns
  them.
- **Detail** - the first instance matching a filter, with security
  groups, reverse DNS and every attached volume's description and
  snapshot count.

Classes
-------
InstanceScanner
    Scanner for EC2 instances and their volumes.

Example
-------
>>> from awsinfo.core import AWSClient
>>> from awsinfo.core.filters import classify
>>> from awsinfo.scanners import InstanceScanner
>>>
>>> scanner = InstanceScanner(AWSClient(credential, region="us-east-1"))
>>> for instance in scanner.list_instances():
...     print(instance.instance_id, instance.state)
>>> detail = scanner.describe_instance(classify("web-01"))

Error Handling
--------------
Failures of the instance listing raise ``ApiCallError`` and abandon the
report. Failures of the per-volume lookups are logged and degrade only
the affected field: the description becomes ``""`` and the snapshot
count becomes ``None``. Calls are made one at a time in device order.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from awsinfo.core.dns import ReverseDnsResolver
from awsinfo.core.exceptions import ApiCallError, NoMatchingInstancesError
from awsinfo.core.filters import InstanceFilter
from awsinfo.core.models import (
    DiskInfo,
    InstanceDetail,
    InstanceSummary,
    reachable_ip,
    tag_label,
)

# Module logger
logger = logging.getLogger(__name__)


class InstanceScanner:
    """
    Scanner for EC2 instances.

    Parameters
    ----------
    aws_client : AWSClient
        Instance of AWSClient for AWS API access.
    resolver : ReverseDnsResolver, optional
        Reverse DNS lookup used for the detail report. Without one, no
        lookup is attempted.

    Attributes
    ----------
    region : str
        The AWS region being scanned.
    """

    def __init__(
        self,
        aws_client,
        resolver: Optional[ReverseDnsResolver] = None,
    ) -> None:
        """Initialize the instance scanner."""
        self.aws_client = aws_client
        self.resolver = resolver
        self.region = aws_client.region

        self._ec2_client = None

        logger.debug(f"Initialized InstanceScanner for {self.region}")

    @property
    def ec2_client(self):
        """
        Get EC2 client (lazy loaded).

        Returns
        -------
        EC2.Client
            Boto3 EC2 client.
        """
        if self._ec2_client is None:
            self._ec2_client = self.aws_client.get_ec2_client()
        return self._ec2_client

    # =========================================================================
    # Reports
    # =========================================================================

    def list_instances(self) -> List[InstanceSummary]:
        """
        Summarize every instance in the region.

        Returns
        -------
        list of InstanceSummary
            One entry per instance, in provider order.

        Raises
        ------
        ApiCallError
            If ``describe_instances`` fails.
        """
        instances = self._describe_instances()
        logger.debug(f"Found {len(instances)} instances in {self.region}")
        return [InstanceSummary.from_aws_instance(instance) for instance in instances]

    def describe_instance(self, instance_filter: InstanceFilter) -> InstanceDetail:
        """
        Build the detail report for the first instance matching a filter.

        Parameters
        ----------
        instance_filter : InstanceFilter
            Classified filter to apply to ``describe_instances``.

        Returns
        -------
        InstanceDetail
            The matched instance with its disks and reverse DNS.

        Raises
        ------
        ApiCallError
            If ``describe_instances`` fails.
        NoMatchingInstancesError
            If the filter matched nothing. No further calls are made.
        """
        instances = self._describe_instances(instance_filter.to_filters())

        if not instances:
            raise NoMatchingInstancesError(str(instance_filter))
        if len(instances) > 1:
            logger.warning(
                f"Filter {instance_filter} matched {len(instances)} instances; "
                f"showing only {instances[0]['InstanceId']}"
            )

        instance = instances[0]
        disks = tuple(
            self._describe_disk(mapping)
            for mapping in instance.get("BlockDeviceMappings", [])
        )
        return InstanceDetail.from_aws_instance(
            instance,
            disks=disks,
            reverse_dns=self._reverse_dns(reachable_ip(instance)),
        )

    # =========================================================================
    # Private Methods: API Calls
    # =========================================================================

    def _api_error(self, operation: str, error: Exception) -> ApiCallError:
        """Convert a botocore error into an ApiCallError."""
        if isinstance(error, ClientError):
            err = error.response.get("Error", {})
            code = err.get("Code")
            provider_message = err.get("Message") or str(error)
        else:
            code = None
            provider_message = str(error)
        return ApiCallError(
            f"{operation} failed: {provider_message}",
            operation=operation,
            error_code=code,
            provider_message=provider_message,
            region=self.region,
        )

    def _describe_instances(
        self,
        filters: Optional[List[Dict[str, Any]]] = None,
    ) -> List[Dict[str, Any]]:
        """Fetch every instance (optionally filtered) across all reservations."""
        kwargs: Dict[str, Any] = {}
        if filters:
            kwargs["Filters"] = filters

        instances: List[Dict[str, Any]] = []
        try:
            paginator = self.ec2_client.get_paginator("describe_instances")
            for page in paginator.paginate(**kwargs):
                for reservation in page.get("Reservations", []):
                    instances.extend(reservation.get("Instances", []))
        except (ClientError, BotoCoreError) as e:
            raise self._api_error("describe_instances", e)

        return instances

    def _describe_disk(self, mapping: Dict[str, Any]) -> DiskInfo:
        """Look up description and snapshot count for one block device."""
        device_name = mapping.get("DeviceName", "")
        volume_id = mapping.get("Ebs", {}).get("VolumeId", "")
        if not volume_id:
            return DiskInfo(volume_id="", device_name=device_name)

        return DiskInfo(
            volume_id=volume_id,
            device_name=device_name,
            description=self._volume_description(volume_id),
            snapshot_count=self._snapshot_count(volume_id),
        )

    def _volume_description(self, volume_id: str) -> str:
        """Return the volume's tag label, or ``""`` if it cannot be fetched."""
        try:
            response = self.ec2_client.describe_volumes(VolumeIds=[volume_id])
        except (ClientError, BotoCoreError) as e:
            logger.error(self._api_error(f"describe_volumes({volume_id})", e).message)
            return ""

        volumes = response.get("Volumes", [])
        if not volumes:
            return ""
        return tag_label(volumes[0].get("Tags"))

    def _snapshot_count(self, volume_id: str) -> Optional[int]:
        """Count snapshots of a volume, or ``None`` if it cannot be determined."""
        count = 0
        try:
            paginator = self.ec2_client.get_paginator("describe_snapshots")
            for page in paginator.paginate(
                Filters=[{"Name": "volume-id", "Values": [volume_id]}]
            ):
                count += len(page.get("Snapshots", []))
        except (ClientError, BotoCoreError) as e:
            logger.error(self._api_error(f"describe_snapshots({volume_id})", e).message)
            return None
        return count

    def _reverse_dns(self, ip: Optional[str]) -> Optional[str]:
        if ip is None or self.resolver is None:
            return None
        return self.resolver.lookup(ip)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"InstanceScanner(region='{self.region}', resolver={self.resolver!r})"
