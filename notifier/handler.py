from __future__ import annotations
from typing import Any, Optional, Protocol

from notifier.errors import ChannelUnavailable, ContractViolation
from notifier.event import ActivityEvent
from notifier.eventTime import localize_event_time
from notifier.labels import DirectoryError, Fallback, IdentityDirectory, LabelResult, resolve_account_label
from notifier.logger import logger as default_logger
from notifier.message import Alert, build_alert
from notifier.settings import NotifierSettings


class NotificationChannel(Protocol):
    def publish(self, target: str, subject: str, body: str) -> str: ...


class RootActivityNotifier:
    """
    Turns one root activity event into one email via the channel.

    Bad events, directory outages and publish failures are logged, not
    raised. The directory and channel are anything with the methods of
    clients.iam_directory.IamDirectory and clients.sns_channel.SnsChannel.
    """

    def __init__(
        self,
        directory: IdentityDirectory,
        channel: NotificationChannel,
        settings: NotifierSettings,
        logger=None,
    ):
        self.directory = directory
        self.channel = channel
        self.settings = settings
        self.zone = settings.zone
        self.log = logger or default_logger

    def handle(self, payload: Any) -> None:
        self.log.debug("Received event", extra={"event": payload})

        try:
            event = ActivityEvent.from_payload(payload)
            when = localize_event_time(event.timestamp, self.zone)
        except ContractViolation as e:
            self.log.error(
                "Dropping malformed root activity event",
                extra={"error_kind": e.kind, "reason": str(e), "fields": e.fields},
            )
            return

        fields = event.log_fields()
        self.log.debug(
            "Event fields extracted",
            extra={**fields, "local_date": when.date, "local_time": when.time, "timezone": self.settings.display_timezone},
        )

        result = resolve_account_label(
            self.directory,
            event.account_id,
            check_alias_account=self.settings.alias_account_check,
        )
        self._log_label(result, fields)

        alert = build_alert(event, result.label, when, self.settings.subject_limit)
        self._publish(alert, {**fields, "label": result.label})

    def _log_label(self, result: LabelResult, fields: dict) -> None:
        extra = {**fields, "label": result.label}
        if isinstance(result, DirectoryError):
            self.log.error(
                "Account alias lookup failed, using account id",
                extra={**extra, "error_kind": "DirectoryUnavailable", "reason": result.reason},
            )
        elif isinstance(result, Fallback):
            self.log.info("Account alias not available, using account id", extra={**extra, "reason": result.reason})
        else:
            self.log.info("Account alias resolved", extra=extra)

    def _publish(self, alert: Alert, fields: dict) -> None:
        try:
            message_id = self.channel.publish(self.settings.topic_arn, alert.subject, alert.body)
        except ChannelUnavailable as e:
            # one attempt, no retry
            self.log.error(
                "Root activity alert not published",
                extra={**fields, "error_kind": e.kind, "reason": str(e), "topic_arn": self.settings.topic_arn},
            )
            return
        self.log.info("Root activity alert published", extra={**fields, "message_id": message_id})
