import copy
import json
from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from notifier.errors import ChannelUnavailable, DirectoryUnavailable
from notifier.message import DETAIL_HEADER
from notifier.settings import NotifierSettings

TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:Root-Activity"

CONSOLE_LOGIN_EVENT = {
    "version": "0",
    "id": "6f87d04b-9f74-4f04-a780-7acf4b0a9b38",
    "detail-type": "AWS Console Sign In via CloudTrail",
    "source": "aws.signin",
    "account": "123456789012",
    "time": "2023-09-23T10:15:00Z",
    "region": "us-east-1",
    "resources": [],
    "detail": {
        "eventVersion": "1.08",
        "userIdentity": {
            "type": "Root",
            "principalId": "123456789012",
            "arn": "arn:aws:iam::123456789012:root",
            "accountId": "123456789012",
        },
        "eventTime": "2023-09-23T10:15:00Z",
        "eventSource": "signin.amazonaws.com",
        "eventName": "ConsoleLogin",
        "awsRegion": "us-east-1",
        "sourceIPAddress": "203.0.113.10",
        "userAgent": "Mozilla/5.0",
        "requestParameters": None,
        "responseElements": {"ConsoleLogin": "Success"},
        "additionalEventData": {"MFAUsed": "No", "MobileVersion": "No"},
        "eventType": "AwsConsoleSignIn",
    },
}


class FakeDirectory:
    def __init__(self, aliases: Optional[List[str]] = None, error: Optional[Exception] = None,
                 caller: str = "123456789012"):
        self.aliases = list(aliases or [])
        self.error = error
        self.caller = caller
        self.calls = 0

    def list_account_aliases(self) -> List[str]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.aliases)

    def caller_account_id(self) -> str:
        return self.caller


class FakeChannel:
    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.published = []

    def publish(self, target: str, subject: str, body: str) -> str:
        if self.error:
            raise self.error
        self.published.append({"target": target, "subject": subject, "body": body})
        return f"msg-{len(self.published)}"


@pytest.fixture
def event():
    return copy.deepcopy(CONSOLE_LOGIN_EVENT)


@pytest.fixture
def settings():
    return NotifierSettings(topic_arn=TOPIC_ARN)


@pytest.fixture
def log():
    return MagicMock()


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def broken_directory():
    return FakeDirectory(error=DirectoryUnavailable("ListAccountAliases failed: EndpointConnectionError"))


@pytest.fixture
def broken_channel():
    return FakeChannel(error=ChannelUnavailable("SNS publish failed: Throttling"))


def event_from_body(body: str) -> dict:
    # inverse of the detail section of build_body
    _, _, tail = body.partition(f"{DETAIL_HEADER}\n\n")
    return json.loads(tail)
