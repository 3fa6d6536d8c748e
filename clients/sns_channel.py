from __future__ import annotations
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from notifier.errors import ChannelUnavailable
from notifier.message import SUBJECT_LIMIT


def sns(region: Optional[str] = None):
    return boto3.client("sns", region_name=region)


class SnsChannel:
    def __init__(self, sns_client):
        self._sns = sns_client

    @classmethod
    def from_region(cls, region: Optional[str] = None) -> "SnsChannel":
        return cls(sns(region))

    def publish(self, target: str, subject: str, body: str) -> str:
        """
        fan the alert out to every subscriber of the topic
        returns the SNS MessageId, ChannelUnavailable on any botocore error
        """
        try:
            resp = self._sns.publish(
                TargetArn=target,
                Subject=subject[:SUBJECT_LIMIT],  #SNS rejects longer subjects outright
                Message=body,
            )
        except (ClientError, BotoCoreError) as e:
            raise ChannelUnavailable(f"SNS publish to {target} failed: {e}") from e
        return resp.get("MessageId", "")
