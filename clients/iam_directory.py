from __future__ import annotations
from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from notifier.errors import DirectoryUnavailable


def iam(region: Optional[str] = None):
    # IAM is global, region only picks the endpoint
    return boto3.client("iam", region_name=region)


def sts(region: Optional[str] = None):
    return boto3.client("sts", region_name=region)


class IamDirectory:
    """Account aliases from IAM, caller account from STS."""

    def __init__(self, iam_client, sts_client):
        self._iam = iam_client
        self._sts = sts_client

    @classmethod
    def from_region(cls, region: Optional[str] = None) -> "IamDirectory":
        return cls(iam(region), sts(region))

    def list_account_aliases(self) -> List[str]:
        #an account has at most one alias, so the first page is all of them
        try:
            resp = self._iam.list_account_aliases()
        except (ClientError, BotoCoreError) as e:
            raise DirectoryUnavailable(f"ListAccountAliases failed: {e}") from e
        return list(resp.get("AccountAliases", []))

    def caller_account_id(self) -> str:
        try:
            resp = self._sts.get_caller_identity()
        except (ClientError, BotoCoreError) as e:
            raise DirectoryUnavailable(f"GetCallerIdentity failed: {e}") from e
        return resp["Account"]
