"""
Precondition Validators

Existence and status checks run before any mutating call. Status checks are
pure over an already-fetched User and narrow it on success.
"""

from typing import Dict, List, Optional, Tuple

from oktagon.app.services import IUserService
from oktagon.domain.entities import (
    ActivatableUser,
    Group,
    PasswordExpirableUser,
    User,
    UserStatus,
)
from oktagon.libs.result import Error, Result, Return

ACTIVATABLE_STATUSES = (UserStatus.staged, UserStatus.deprovisioned)

PASSWORD_EXPIRABLE_STATUSES = (
    UserStatus.active,
    UserStatus.staged,
    UserStatus.provisioned,
    UserStatus.locked_out,
    UserStatus.recovery,
    UserStatus.password_expired,
)

# Remediation for users that cannot be activated but can still reach ACTIVE
ACTIVATION_REMEDIATIONS: Dict[UserStatus, str] = {
    UserStatus.provisioned: "please follow through with the activation workflow",
    UserStatus.locked_out: "please use the unlock command",
    UserStatus.password_expired: (
        "please instruct user to login with temporary password and follow the "
        "password reset process"
    ),
    UserStatus.recovery: (
        "please follow through with the activation workflow or restart the "
        "workflow using the reactivate-user command"
    ),
    UserStatus.suspended: "please use the unsuspend-user command",
}


def user_not_found(user_id: str, consequence: str) -> Error:
    return Error("USER_NOT_FOUND", f"User [{user_id}] does not exist. {consequence}")


async def validate_user_exists(
    service: IUserService, user_id: str, consequence: str
) -> Result[User]:
    """
    Fetch a user and fail if it does not exist.

    Args:
        service: User service used for the lookup
        user_id: ID or login of the user
        consequence: Sentence appended to the not-found message (e.g. "Cannot activate.")

    Returns:
        Result with the user, USER_NOT_FOUND Error, or the lookup's own Error
    """
    result = await service.get_user(user_id)
    return result.and_then(
        lambda user: Return.from_optional(user, user_not_found(user_id, consequence))
    )


def validate_user_status_for_activation(user: User) -> Result[ActivatableUser]:
    if user.status in ACTIVATABLE_STATUSES:
        return Return.ok(ActivatableUser(user))

    message = (
        f"User [{user.id}] [{user.email}] has status [{user.status.value}]. "
        f"Activation is reserved for users with status "
        f"{UserStatus.staged.value} or {UserStatus.deprovisioned.value}."
    )
    remediation = ACTIVATION_REMEDIATIONS.get(user.status)
    if remediation:
        message += (
            f" To transition user to {UserStatus.active.value} status, {remediation}."
        )
    return Return.err(Error("INVALID_USER_STATUS", message))


def validate_user_status_for_password_expiration(
    user: User,
) -> Result[PasswordExpirableUser]:
    if user.status in PASSWORD_EXPIRABLE_STATUSES:
        return Return.ok(PasswordExpirableUser(user))

    permitted = [status.value for status in PASSWORD_EXPIRABLE_STATUSES]
    return Return.err(
        Error(
            "INVALID_USER_STATUS",
            "Expiring a password is reserved for users with status: "
            f"{', '.join(permitted[:-1])}, or {permitted[-1]}.",
        )
    )


def validate_membership_targets(
    user_result: Result[Optional[User]],
    group_result: Result[Optional[Group]],
    user_id: str,
    group_id: str,
    consequence: str,
) -> Result[Tuple[User, Group]]:
    """
    Combine a user lookup and a group lookup into one outcome.

    Lookup failures win over missing resources (user lookup first). When
    resources are missing, every missing one is named in a single message,
    group before user.
    """
    if user_result.is_err():
        return user_result
    if group_result.is_err():
        return group_result

    user, group = user_result.value, group_result.value

    missing: List[str] = []
    if group is None:
        missing.append(f"Group [{group_id}] does not exist.")
    if user is None:
        missing.append(f"User [{user_id}] does not exist.")

    if missing:
        return Return.err(
            Error("RESOURCE_NOT_FOUND", " ".join(missing + [consequence]), cause=missing)
        )

    return Return.ok((user, group))
