import boto3
import pytest
from botocore.exceptions import EndpointConnectionError
from botocore.stub import Stubber

from clients.iam_directory import IamDirectory
from clients.sns_channel import SnsChannel
from notifier.errors import ChannelUnavailable, DirectoryUnavailable

from conftest import TOPIC_ARN

FAKE_CREDS = {
    "region_name": "us-east-1",
    "aws_access_key_id": "testing",
    "aws_secret_access_key": "testing",
}


@pytest.fixture
def iam_client():
    return boto3.client("iam", **FAKE_CREDS)


@pytest.fixture
def sts_client():
    return boto3.client("sts", **FAKE_CREDS)


@pytest.fixture
def sns_client():
    return boto3.client("sns", **FAKE_CREDS)


def test_list_aliases(iam_client, sts_client):
    with Stubber(iam_client) as stub:
        stub.add_response("list_account_aliases", {"AccountAliases": ["prod-account"], "IsTruncated": False}, {})
        assert IamDirectory(iam_client, sts_client).list_account_aliases() == ["prod-account"]


def test_list_aliases_access_denied(iam_client, sts_client):
    with Stubber(iam_client) as stub:
        stub.add_client_error("list_account_aliases", service_error_code="AccessDenied", http_status_code=403)
        with pytest.raises(DirectoryUnavailable, match="AccessDenied"):
            IamDirectory(iam_client, sts_client).list_account_aliases()


def test_list_aliases_transport_error():
    class Unreachable:
        def list_account_aliases(self):
            raise EndpointConnectionError(endpoint_url="https://iam.amazonaws.com")

    with pytest.raises(DirectoryUnavailable):
        IamDirectory(Unreachable(), None).list_account_aliases()


def test_caller_account(iam_client, sts_client):
    with Stubber(sts_client) as stub:
        stub.add_response(
            "get_caller_identity",
            {"UserId": "AROAEXAMPLE:fn", "Account": "123456789012", "Arn": "arn:aws:sts::123456789012:assumed-role/x/fn"},
            {},
        )
        assert IamDirectory(iam_client, sts_client).caller_account_id() == "123456789012"


def test_publish(sns_client):
    with Stubber(sns_client) as stub:
        stub.add_response(
            "publish",
            {"MessageId": "5a1c0e3d"},
            {"TargetArn": TOPIC_ARN, "Subject": "s" * 100, "Message": "body"},
        )
        assert SnsChannel(sns_client).publish(TOPIC_ARN, "s" * 150, "body") == "5a1c0e3d"
        stub.assert_no_pending_responses()


def test_publish_error(sns_client):
    with Stubber(sns_client) as stub:
        stub.add_client_error("publish", service_error_code="NotFound", service_message="Topic does not exist")
        with pytest.raises(ChannelUnavailable, match="Topic does not exist"):
            SnsChannel(sns_client).publish(TOPIC_ARN, "subject", "body")
