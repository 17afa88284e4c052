"""
Shared fixtures for tagsync tests.
"""
import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from tagsync.client import TagClient


ARN = "arn:aws:timestream-influxdb:us-east-1:123456789012:db-instance/abc123def4"


class FakeTagClient(TagClient):
    """In-memory backend: returns ``tags`` or raises ``error``."""

    name = "fake"

    def __init__(self, tags=None, error=None):
        self.tags = tags if tags is not None else {}
        self.error = error
        self.calls = []

    def list_tags(self, identifier, **call_options):
        self.calls.append((identifier, call_options))
        if self.error is not None:
            raise self.error
        return dict(self.tags)


@pytest.fixture
def arn():
    return ARN


@pytest.fixture
def sample_tags():
    """Tags of a production database instance."""
    return {"env": "prod", "team": "infra"}


@pytest.fixture
def fake_client(sample_tags):
    return FakeTagClient(sample_tags)


@pytest.fixture
def throttled():
    return ClientError(
        {"Error": {"Code": "ThrottlingException", "Message": "throttled"}},
        "ListTagsForResource",
    )


@pytest.fixture
def influx_client():
    """Real timestream-influxdb client that never leaves the process."""
    return boto3.client(
        "timestream-influxdb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def influx_stubber(influx_client):
    with Stubber(influx_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def tagging_client():
    return boto3.client(
        "resourcegroupstaggingapi",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
