"""Transition records and fire results for the order lifecycle FSM.

This module provides TransitionRecord for the per-order history of accepted
transitions and FireResult for reporting the outcome of a trigger, accepted
or rejected, without raising.
"""

from __future__ import annotations

from typing import Literal, Optional

import pydantic as pd

from design_patterns.fsm.order_state import OrderState, OrderTrigger


class IllegalTransitionError(RuntimeError):
    """Raised when a rejected FireResult is unwrapped.

    Attributes:
        state: The state the machine was in when the trigger was fired.
        trigger: The trigger that was rejected.
    """

    def __init__(self, state: OrderState, trigger: object, message: str) -> None:
        super().__init__(message)
        self.state = state
        self.trigger = trigger


class TransitionRecord(pd.BaseModel):
    """One accepted transition in an order's history.

    Attributes:
        source: State before the trigger was fired
        trigger: The trigger that was fired
        destination: State after the trigger was fired
        reentry: True when source and destination are the same state
    """

    source: OrderState
    trigger: OrderTrigger
    destination: OrderState

    model_config = pd.ConfigDict(frozen=True)

    @property
    def reentry(self) -> bool:
        return self.source == self.destination

    def __repr__(self) -> str:
        return (
            f"TransitionRecord({self.source.value} --{self.trigger.value}--> "
            f"{self.destination.value})"
        )


class FireResult(pd.BaseModel):
    """Outcome of firing a trigger.

    An accepted trigger yields ok=True and the new state. A rejected trigger
    yields ok=False, the unchanged state, an error code and a message.

    Error codes:
        ILLEGAL_TRANSITION: trigger is known but not permitted from the current state
        INVALID_TRIGGER: value passed is not an OrderTrigger
    """

    ok: bool
    state: OrderState
    trigger: Optional[OrderTrigger] = None
    code: Optional[Literal["ILLEGAL_TRANSITION", "INVALID_TRIGGER"]] = None
    error: Optional[str] = None

    model_config = pd.ConfigDict(frozen=True)

    def is_ok(self) -> bool:
        return self.ok

    def is_err(self) -> bool:
        return not self.ok

    def unwrap(self) -> OrderState:
        """Return the resulting state, raising if the trigger was rejected.

        Raises:
            IllegalTransitionError: If the result is an error.
        """
        if not self.ok:
            raise IllegalTransitionError(
                self.state, self.trigger, self.error or "Transition rejected"
            )
        return self.state
