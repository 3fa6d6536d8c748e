from __future__ import annotations
from dataclasses import dataclass
from typing import List, Protocol, Union

from notifier.errors import DirectoryUnavailable


class IdentityDirectory(Protocol):
    def list_account_aliases(self) -> List[str]: ...

    def caller_account_id(self) -> str: ...


@dataclass(frozen=True)
class Resolved:
    label: str  #first alias, as ordered by IAM


@dataclass(frozen=True)
class Fallback:
    label: str  #raw account id
    reason: str = "no account alias configured"


@dataclass(frozen=True)
class DirectoryError:
    label: str  #raw account id
    reason: str


LabelResult = Union[Resolved, Fallback, DirectoryError]


def resolve_account_label(
    directory: IdentityDirectory,
    account_id: str,
    *,
    check_alias_account: bool = False,
) -> LabelResult:
    """
    Work out what to call the account in the alert.

    Every outcome carries a usable label: the first alias when the
    directory has one, the account id otherwise. Directory failures
    are folded into DirectoryError instead of raised so the alert
    still goes out.
    """
    try:
        aliases = directory.list_account_aliases()
        if check_alias_account and aliases:
            caller = directory.caller_account_id()
            if caller != account_id:
                return Fallback(
                    label=account_id,
                    reason=f"aliases belong to account {caller}, not {account_id}",
                )
    except DirectoryUnavailable as e:
        return DirectoryError(label=account_id, reason=str(e))

    if not aliases:
        return Fallback(label=account_id)
    return Resolved(label=aliases[0])
