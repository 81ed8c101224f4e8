"""
Pytest configuration and shared fixtures for testing.
"""

import boto3
import pytest
from moto import mock_aws

from awsinfo.core.aws_client import AWSClient
from awsinfo.core.clients import ClientCredential

CREDENTIAL_FILE = """\
# acme production account
export EC2_PRIVATE_KEY=~/.ec2/pk-acme.pem
export EC2_ACCESS_KEY="testing"
export EC2_SECRET_ACCESS_KEY="testing"
"""


class FakeResolver:
    """Reverse DNS resolver recording every lookup."""

    def __init__(self, answer="web-01.example.com."):
        self.answer = answer
        self.calls = []

    def lookup(self, ip):
        self.calls.append(ip)
        return self.answer


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    import os

    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def mock_aws_environment(aws_credentials):
    """Create a mocked AWS environment."""
    with mock_aws():
        yield


@pytest.fixture
def credential():
    """Credential matching the moto test keys."""
    return ClientCredential(access_key="testing", secret_key="testing")


@pytest.fixture
def aws_client(mock_aws_environment, credential):
    """Create an AWSClient instance for testing."""
    return AWSClient(credential, region="us-east-1")


@pytest.fixture
def ec2_client(mock_aws_environment):
    """Create a boto3 EC2 client for setting up test resources."""
    return boto3.client("ec2", region_name="us-east-1")


@pytest.fixture
def resolver():
    """A resolver that always answers and records its calls."""
    return FakeResolver()


@pytest.fixture
def clients_dir(tmp_path):
    """A clients directory holding one well-formed client, 'acme'."""
    directory = tmp_path / "clients"
    directory.mkdir()
    (directory / "acme").write_text(CREDENTIAL_FILE)
    return directory


@pytest.fixture
def web_security_group(ec2_client):
    """Create a security group for instances."""
    response = ec2_client.create_security_group(
        GroupName="web",
        Description="Web servers",
    )
    return response["GroupId"]


@pytest.fixture
def web_instance(ec2_client, web_security_group):
    """
    Create a running instance named 'web-01' whose root volume is tagged
    and has two snapshots.
    """
    response = ec2_client.run_instances(
        ImageId="ami-12345678",
        MinCount=1,
        MaxCount=1,
        InstanceType="t2.micro",
        SecurityGroupIds=[web_security_group],
        TagSpecifications=[
            {
                "ResourceType": "instance",
                "Tags": [
                    {"Key": "Name", "Value": "web-01"},
                    {"Key": "Team", "Value": "platform"},
                ],
            }
        ],
    )
    instance_id = response["Instances"][0]["InstanceId"]

    instance = ec2_client.describe_instances(InstanceIds=[instance_id])[
        "Reservations"
    ][0]["Instances"][0]
    volume_id = instance["BlockDeviceMappings"][0]["Ebs"]["VolumeId"]

    ec2_client.create_tags(
        Resources=[volume_id],
        Tags=[{"Key": "Name", "Value": "web-01 root"}],
    )
    ec2_client.create_snapshot(VolumeId=volume_id, Description="nightly 1")
    ec2_client.create_snapshot(VolumeId=volume_id, Description="nightly 2")

    return instance_id
