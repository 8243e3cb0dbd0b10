"""
Store Status Value Objects

Lifecycle states of a store and of a category, plus the transition table
that drives store activation, blocking and disabling.
"""

from storehub.core.domain import (
    InvalidOperationException,
    StatusEnum,
    StoreAlreadyActiveException,
    StoreBlockedException,
    StoreInactiveException,
    StorePendingException,
)


class StoreStatus(StatusEnum):
    """
    Store lifecycle states.

    Every state can be re-activated; there are no terminal states.
    New stores always start as PENDING.
    """

    PENDING = "pending"
    ACTIVE = "active"
    BLOCK = "block"
    DISABLE = "disable"


class CategoryStatus(StatusEnum):
    """Category states. Only ACTIVE categories accept new stores."""

    PENDING = "pending"
    ACTIVE = "active"
    DISABLE = "disable"


class StoreAction(StatusEnum):
    """Status-changing operations on a store."""

    ACTIVATE = "activate"
    BLOCK = "block"
    DISABLE = "disable"


# (action, current status) -> next status, or the exception raised instead.
# Blocking a disabled store is rejected as pending.
STORE_TRANSITIONS: dict[tuple[StoreAction, StoreStatus], StoreStatus | type[InvalidOperationException]] = {
    (StoreAction.ACTIVATE, StoreStatus.PENDING): StoreStatus.ACTIVE,
    (StoreAction.ACTIVATE, StoreStatus.ACTIVE): StoreAlreadyActiveException,
    (StoreAction.ACTIVATE, StoreStatus.BLOCK): StoreStatus.ACTIVE,
    (StoreAction.ACTIVATE, StoreStatus.DISABLE): StoreStatus.ACTIVE,
    (StoreAction.BLOCK, StoreStatus.PENDING): StorePendingException,
    (StoreAction.BLOCK, StoreStatus.ACTIVE): StoreStatus.BLOCK,
    (StoreAction.BLOCK, StoreStatus.BLOCK): StoreBlockedException,
    (StoreAction.BLOCK, StoreStatus.DISABLE): StorePendingException,
    (StoreAction.DISABLE, StoreStatus.PENDING): StoreStatus.DISABLE,
    (StoreAction.DISABLE, StoreStatus.ACTIVE): StoreStatus.DISABLE,
    (StoreAction.DISABLE, StoreStatus.BLOCK): StoreBlockedException,
    (StoreAction.DISABLE, StoreStatus.DISABLE): StoreInactiveException,
}


def next_store_status(action: StoreAction, current: StoreStatus) -> StoreStatus:
    """
    Resolve the status a store moves to when `action` is applied.

    Args:
        action: Requested transition
        current: Status the store is in now

    Returns:
        The resulting status

    Raises:
        InvalidOperationException: One of the four precondition errors
            when the transition is not allowed from `current`
    """
    outcome = STORE_TRANSITIONS[(action, current)]
    if isinstance(outcome, StoreStatus):
        return outcome
    raise outcome(operation=action.value, current_state=current.value)


def allowed_actions(current: StoreStatus) -> list[StoreAction]:
    """List the actions that succeed from `current`."""
    return [
        action
        for action in StoreAction
        if isinstance(STORE_TRANSITIONS[(action, current)], StoreStatus)
    ]
