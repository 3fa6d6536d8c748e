from __future__ import annotations
import json
from dataclasses import dataclass

from notifier.event import ActivityEvent
from notifier.eventTime import LocalTime

SUBJECT_LIMIT = 100  #SNS email subject hard limit
DETAIL_HEADER = "Full Event Detail is given below:"


@dataclass(frozen=True)
class Alert:
    subject: str
    body: str


def build_subject(event_name: str, label: str, limit: int = SUBJECT_LIMIT) -> str:
    return f'The "{event_name}" was used by root in Account-"{label}"'[:limit]


def build_body(event: ActivityEvent, label: str, when: LocalTime) -> str:
    summary = (
        f"The {event.identity_type} user from {label} with Account Id {event.account_id} "
        f"used the {event.event_name} service at {when.time} on {when.date} "
        f"in the {event.region} Region."
    )
    #raw payload goes out untouched, key order included
    return f"{summary}\n\n{DETAIL_HEADER}\n\n{json.dumps(event.raw)}"


def build_alert(event: ActivityEvent, label: str, when: LocalTime, subject_limit: int = SUBJECT_LIMIT) -> Alert:
    return Alert(
        subject=build_subject(event.event_name, label, subject_limit),
        body=build_body(event, label, when),
    )
