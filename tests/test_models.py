"""
Tests for the instance data models.
"""

from awsinfo.core.models import (
    DiskInfo,
    InstanceDetail,
    InstanceSummary,
    reachable_ip,
    tag_label,
)

RAW_INSTANCE = {
    "InstanceId": "i-0abc123",
    "InstanceType": "m5.large",
    "ImageId": "ami-0def456",
    "Placement": {"AvailabilityZone": "us-east-1b"},
    "State": {"Name": "running"},
    "PublicIpAddress": "203.0.113.7",
    "PrivateIpAddress": "10.0.0.7",
    "Tags": [{"Key": "Team", "Value": "db"}, {"Key": "Name", "Value": "db-01"}],
    "SecurityGroups": [
        {"GroupId": "sg-1", "GroupName": "db"},
        {"GroupId": "sg-2", "GroupName": "ssh"},
    ],
}


class TestTagLabel:
    """Tests for tag_label."""

    def test_prefers_name_tag(self):
        assert tag_label(RAW_INSTANCE["Tags"]) == "db-01"

    def test_falls_back_to_first_tag(self):
        tags = [{"Key": "Role", "Value": "cache"}, {"Key": "Env", "Value": "prod"}]
        assert tag_label(tags) == "cache"

    def test_no_tags(self):
        assert tag_label(None) == ""
        assert tag_label([]) == ""


class TestReachableIp:
    """Tests for reachable_ip."""

    def test_running_prefers_public(self):
        assert reachable_ip(RAW_INSTANCE) == "203.0.113.7"

    def test_running_private_only(self):
        instance = dict(RAW_INSTANCE)
        del instance["PublicIpAddress"]
        assert reachable_ip(instance) == "10.0.0.7"

    def test_not_running(self):
        instance = dict(RAW_INSTANCE, State={"Name": "stopped"})
        assert reachable_ip(instance) is None


class TestInstanceSummary:
    """Tests for InstanceSummary."""

    def test_from_aws_instance(self):
        summary = InstanceSummary.from_aws_instance(RAW_INSTANCE)
        assert summary == InstanceSummary(
            instance_id="i-0abc123",
            instance_type="m5.large",
            name="db-01",
            state="running",
            ip="203.0.113.7",
        )

    def test_minimal_instance(self):
        summary = InstanceSummary.from_aws_instance({"InstanceId": "i-1"})
        assert summary.name == ""
        assert summary.state == ""
        assert summary.ip is None


class TestInstanceDetail:
    """Tests for InstanceDetail."""

    def test_from_aws_instance(self):
        disks = (DiskInfo("vol-1", "/dev/xvda", "root", 4),)
        detail = InstanceDetail.from_aws_instance(
            RAW_INSTANCE, disks=disks, reverse_dns="db-01.example.com."
        )

        assert detail.instance_id == "i-0abc123"
        assert detail.name == "db-01"
        assert detail.image_id == "ami-0def456"
        assert detail.availability_zone == "us-east-1b"
        assert detail.security_groups == ("db", "ssh")
        assert detail.disks == disks
        assert detail.reverse_dns == "db-01.example.com."
        assert detail.is_running

    def test_to_dict(self):
        detail = InstanceDetail.from_aws_instance(
            RAW_INSTANCE, disks=(DiskInfo("vol-1", "/dev/xvda", "root", None),)
        )

        data = detail.to_dict()

        assert data["security_groups"] == ["db", "ssh"]
        assert data["disks"] == [
            {
                "volume_id": "vol-1",
                "device_name": "/dev/xvda",
                "description": "root",
                "snapshot_count": None,
            }
        ]
