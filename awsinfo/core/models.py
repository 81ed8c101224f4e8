"""
Instance Data Models
====================

Typed records decoded once from EC2 API responses. Reporters only ever
see these records, never raw response dictionaries.

Classes
-------
InstanceSummary
    One line of the instance list.
DiskInfo
    One attached block device with its description and snapshot count.
InstanceDetail
    Everything shown in the single-instance report.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

RUNNING = "running"


def tag_label(tags: Optional[List[Dict[str, str]]]) -> str:
    """
    Pick a display label from an EC2 tag list.

    Uses the ``Name`` tag when present, otherwise the first tag's value,
    otherwise an empty string.
    """
    if not tags:
        return ""
    for tag in tags:
        if tag.get("Key") == "Name":
            return tag.get("Value", "")
    return tags[0].get("Value", "")


def reachable_ip(instance: Dict[str, Any]) -> Optional[str]:
    """Return the instance's IP if it is running, preferring the public one."""
    if instance.get("State", {}).get("Name") != RUNNING:
        return None
    return instance.get("PublicIpAddress") or instance.get("PrivateIpAddress")


@dataclass(frozen=True)
class InstanceSummary:
    """Identity and state of one instance for the list report."""

    instance_id: str
    instance_type: str
    name: str
    state: str
    ip: Optional[str] = None

    @classmethod
    def from_aws_instance(cls, instance: Dict[str, Any]) -> InstanceSummary:
        """Create an InstanceSummary from a ``describe_instances`` item."""
        return cls(
            instance_id=instance["InstanceId"],
            instance_type=instance.get("InstanceType", ""),
            name=tag_label(instance.get("Tags")),
            state=instance.get("State", {}).get("Name", ""),
            ip=reachable_ip(instance),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DiskInfo:
    """
    An attached block device.

    Attributes
    ----------
    volume_id : str
        EBS volume id, empty for non-EBS mappings.
    device_name : str
        Device the volume is attached as (e.g. ``/dev/sda1``).
    description : str or None
        The volume's tag label; ``""`` when the lookup failed.
    snapshot_count : int or None
        Snapshots of the volume; ``None`` when it could not be determined.
    """

    volume_id: str
    device_name: str
    description: Optional[str] = None
    snapshot_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class InstanceDetail:
    """Full description of a single instance and its disks."""

    instance_id: str
    name: str
    instance_type: str
    image_id: str
    availability_zone: str
    state: str
    ip: Optional[str] = None
    reverse_dns: Optional[str] = None
    security_groups: Tuple[str, ...] = ()
    disks: Tuple[DiskInfo, ...] = ()

    @property
    def is_running(self) -> bool:
        return self.state == RUNNING

    @classmethod
    def from_aws_instance(
        cls,
        instance: Dict[str, Any],
        disks: Tuple[DiskInfo, ...] = (),
        reverse_dns: Optional[str] = None,
    ) -> InstanceDetail:
        """
        Create an InstanceDetail from a ``describe_instances`` item.

        Disks and reverse DNS need extra lookups, so they are supplied by
        the caller.
        """
        return cls(
            instance_id=instance["InstanceId"],
            name=tag_label(instance.get("Tags")),
            instance_type=instance.get("InstanceType", ""),
            image_id=instance.get("ImageId", ""),
            availability_zone=instance.get("Placement", {}).get("AvailabilityZone", ""),
            state=instance.get("State", {}).get("Name", ""),
            ip=reachable_ip(instance),
            reverse_dns=reverse_dns,
            security_groups=tuple(
                group.get("GroupName", "") for group in instance.get("SecurityGroups", [])
            ),
            disks=disks,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["security_groups"] = list(self.security_groups)
        data["disks"] = [disk.to_dict() for disk in self.disks]
        return data
