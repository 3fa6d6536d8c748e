from __future__ import annotations
from typing import Any, Dict, List, Mapping

from metadata.schema import ACCOUNT_ID_PATH, REQUIRED_PATHS
from notifier.errors import ContractViolation


def lookup_path(payload: Mapping[str, Any], path: str) -> Any:
    """
    walk a dotted path like detail.userIdentity.type
    KeyError if any step is missing or not a mapping
    """
    node: Any = payload
    for part in path.split("."):
        if not isinstance(node, Mapping) or part not in node:
            raise KeyError(path)
        node = node[part]
    return node


def missing_paths(payload: Mapping[str, Any]) -> List[str]:
    missing = []
    for path in REQUIRED_PATHS:
        try:
            value = lookup_path(payload, path)
        except KeyError:
            missing.append(path)
            continue
        if not isinstance(value, str) or not value.strip():#all required fields are non-empty text
            missing.append(path)
    return missing


def invalid_paths(fields: Mapping[str, str]) -> List[str]:
    invalid = []
    account_id = fields[ACCOUNT_ID_PATH]
    if not (account_id.isascii() and account_id.isdigit()):  #numeric account id, used as the fallback label
        invalid.append(ACCOUNT_ID_PATH)
    return invalid


def validate_activity_event(payload: Any) -> Dict[str, str]:
    if not isinstance(payload, Mapping):
        raise ContractViolation(f"Event payload is not an object: {type(payload).__name__}")

    missing = missing_paths(payload)
    if missing:
        raise ContractViolation(f"Event missing fields: {sorted(missing)}", fields=sorted(missing))

    fields = {path: lookup_path(payload, path) for path in REQUIRED_PATHS}
    invalid = invalid_paths(fields)
    if invalid:
        raise ContractViolation(f"Event has malformed fields: {invalid}", fields=invalid)
    return fields
