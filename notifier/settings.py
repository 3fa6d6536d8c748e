from __future__ import annotations
import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from notifier.errors import ConfigError
from notifier.eventTime import DEFAULT_DISPLAY_TIMEZONE, display_zone
from notifier.message import SUBJECT_LIMIT

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = ROOT / "config" / "config.yaml"

TOPIC_ARN_ENV = "RootActivitySnsArnEnv"  #name the stack template sets
_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class NotifierSettings:
    topic_arn: str
    display_timezone: str = DEFAULT_DISPLAY_TIMEZONE
    subject_limit: int = SUBJECT_LIMIT
    alias_account_check: bool = False
    log_level: str = "DEBUG"

    @property
    def zone(self) -> tzinfo:
        return display_zone(self.display_timezone)


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    p = Path(path) if path else DEFAULT_CONFIG_PATH
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _get_arg(environ: Mapping[str, str], name: str) -> str:
    v = environ.get(name)
    if not v:
        raise ConfigError(f"Missing env var: {name}")
    return v


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE


def _as_subject_limit(value: Any) -> int:
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Subject limit must be an integer, got {value!r}")
    if limit <= 0:
        raise ConfigError(f"Subject limit must be positive, got {limit}")
    return min(limit, SUBJECT_LIMIT)  #SNS rejects anything longer


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
) -> NotifierSettings:
    """
    Build settings once per cold start.

    config.yaml gives the defaults, environment variables win over it.
    The topic ARN only ever comes from the environment.
    """
    env = os.environ if environ is None else environ
    cfg = load_config(config_path or env.get("ROOT_ALERT_CONFIG"))
    alert_cfg = cfg.get("alert") or {}
    log_cfg = cfg.get("logging") or {}

    settings = NotifierSettings(
        topic_arn=_get_arg(env, TOPIC_ARN_ENV),
        display_timezone=env.get("DISPLAY_TIMEZONE")
        or alert_cfg.get("display_timezone", DEFAULT_DISPLAY_TIMEZONE),
        subject_limit=_as_subject_limit(env.get("SUBJECT_LIMIT") or alert_cfg.get("subject_limit", SUBJECT_LIMIT)),
        alias_account_check=_as_bool(env.get("ALIAS_ACCOUNT_CHECK") or alert_cfg.get("alias_account_check", False)),
        log_level=str(env.get("LOG_LEVEL") or log_cfg.get("level", "DEBUG")).upper(),
    )
    display_zone(settings.display_timezone)  #fail at cold start on a bad zone name
    return settings
