from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping

from metadata.validate import validate_activity_event


@dataclass(frozen=True)
class ActivityEvent:
    event_name: str
    identity_type: str
    account_id: str
    region: str
    timestamp: str  #raw UTC text, parsed later
    raw: Mapping[str, Any] = field(repr=False, compare=False)

    @classmethod
    def from_payload(cls, payload: Any) -> "ActivityEvent":
        """
        pull the fields the alert needs out of an EventBridge CloudTrail event
        raw keeps the payload itself (not a copy) so the body shows it as received
        """
        fields = validate_activity_event(payload)
        return cls(
            event_name=fields["detail.eventName"],
            identity_type=fields["detail.userIdentity.type"],
            account_id=fields["detail.userIdentity.accountId"],
            region=fields["region"],
            timestamp=fields["time"],
            raw=payload,
        )

    def log_fields(self) -> dict:
        return {
            "event_name": self.event_name,
            "identity_type": self.identity_type,
            "account_id": self.account_id,
            "region": self.region,
            "event_time": self.timestamp,
        }
