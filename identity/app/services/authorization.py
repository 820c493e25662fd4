"""
Authorization Guard

Stateless decisions over the caller's identity and role set.
"""

from enum import Enum
from typing import Iterable, Optional, Set

from pydantic import BaseModel

from identity.domain.entities import ADMIN_ROLE
from identity.domain.errors import AuthorizationError


class AccessRule(str, Enum):
    ADMIN_ONLY = "ADMIN_ONLY"
    SELF_OR_ADMIN = "SELF_OR_ADMIN"


class CallerContext(BaseModel):
    """The authenticated caller as seen by the guard"""

    user_id: int
    username: str
    roles: Set[str]


def is_admin(roles: Iterable[str]) -> bool:
    return ADMIN_ROLE in set(roles)


def is_permitted(
    roles: Iterable[str],
    caller_id: int,
    rule: AccessRule,
    target_user_id: Optional[int] = None,
) -> bool:
    """
    Evaluate an access rule.

    Args:
        roles: Caller's role set
        caller_id: Caller's user ID
        rule: Rule required by the operation
        target_user_id: Owner of the target resource (SELF_OR_ADMIN only)

    Returns:
        True when the caller may proceed
    """
    if is_admin(roles):
        return True
    if rule == AccessRule.SELF_OR_ADMIN:
        return target_user_id is not None and caller_id == target_user_id
    return False


def authorize(
    caller: CallerContext, rule: AccessRule, target_user_id: Optional[int] = None
) -> None:
    """Raise AuthorizationError unless the caller satisfies the rule"""
    if not is_permitted(caller.roles, caller.user_id, rule, target_user_id):
        raise AuthorizationError()
