from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, tzinfo

from dateutil import tz

from metadata.schema import EVENT_TIME_FORMAT
from notifier.errors import ConfigError, ContractViolation

DEFAULT_DISPLAY_TIMEZONE = "Europe/London"


@dataclass(frozen=True)
class LocalTime:
    date: str  # DD-MM-YYYY
    time: str  # HH:MM:SS


def display_zone(name: str) -> tzinfo:
    zone = tz.gettz(name)
    if zone is None:
        raise ConfigError(f"Unknown display timezone: {name!r}")
    return zone


def parse_event_time(value: str) -> datetime:
    """
    strict parse of the EventBridge "time" field, always UTC.
    anything that is not exactly YYYY-MM-DDTHH:MM:SSZ is rejected
    """
    try:
        naive = datetime.strptime(value, EVENT_TIME_FORMAT)
    except (TypeError, ValueError) as e:
        raise ContractViolation(f"Unparseable event time {value!r}: {e}", fields=["time"]) from e
    #strptime takes 2023-9-3T1:5:0Z too, only zero padded text round trips
    if naive.strftime(EVENT_TIME_FORMAT) != value:
        raise ContractViolation(f"Event time {value!r} is not YYYY-MM-DDTHH:MM:SSZ", fields=["time"])
    return naive.replace(tzinfo=tz.UTC)


def localize_event_time(value: str, zone: tzinfo) -> LocalTime:
    local = parse_event_time(value).astimezone(zone)
    return LocalTime(date=local.strftime("%d-%m-%Y"), time=local.strftime("%H:%M:%S"))
