"""OrderStateMachine: finite state machine for the purchase order lifecycle.

This module provides the default order transition table and the
OrderStateMachine class that enforces it. Firing a trigger that the table
does not permit from the current state is rejected with an error result and
leaves the state unchanged.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from design_patterns.fsm.order_state import INITIAL_STATE, OrderState, OrderTrigger
from design_patterns.fsm.transition import FireResult, TransitionRecord

logger = logging.getLogger(__name__)


# Default transition table: state -> permitted trigger -> next state.
# States without a row (COMPLETED, CANCELLED, RETURNED_*) are absorbing.
ORDER_TRANSITIONS: Dict[OrderState, Dict[OrderTrigger, OrderState]] = {
    # from new to draft or registered
    OrderState.NEW: {
        OrderTrigger.CREATE_ORDER: OrderState.NEW,  # reentrant
        OrderTrigger.SAVE_AS_DRAFT: OrderState.DRAFT,
        OrderTrigger.REGISTER_ORDER: OrderState.REGISTERED,
    },
    OrderState.DRAFT: {
        OrderTrigger.REGISTER_ORDER: OrderState.REGISTERED,
    },
    OrderState.REGISTERED: {
        OrderTrigger.CANCELL_BY_CUSTOMER: OrderState.CANCELLED,
        OrderTrigger.BEGIN_PROCESSING: OrderState.PROCESSING,
    },
    OrderState.PROCESSING: {
        OrderTrigger.CANCELL_BY_SUPPLIER: OrderState.CANCELLED,
        OrderTrigger.PACKAGING: OrderState.PACKAGED,
    },
    OrderState.PACKAGED: {
        OrderTrigger.SHIPPING: OrderState.SHIPPED,
        OrderTrigger.RETURN_BY_SHIPMENT: OrderState.RETURNED_BY_SHIPMENT,
    },
    OrderState.SHIPPED: {
        OrderTrigger.DELIVERING: OrderState.COMPLETED,
        OrderTrigger.RETURN_BY_SHIPMENT: OrderState.RETURNED_BY_SHIPMENT,
        OrderTrigger.RETURN_BY_CUSTOMER: OrderState.RETURNED_BY_CUSTOMER,
    },
}


class OrderStateMachine:
    """Finite state machine for a purchase order.

    Manages trigger-driven transitions validated against a transition table.
    Uses a result object for explicit handling of rejected triggers, so
    order processing code can react to a rejection instead of crashing.

    The machine does no locking; callers sharing one instance between
    threads must synchronize externally.

    Attributes:
        state: The current OrderState of the machine.
        history: Accepted transitions, oldest first.
        transitions: Transition table defining permitted triggers.

    Example:
        >>> machine = OrderStateMachine()
        >>> machine.state
        <OrderState.NEW: 'New'>
        >>> machine.fire(OrderTrigger.REGISTER_ORDER).is_ok()
        True
        >>> machine.fire(OrderTrigger.DELIVERING).is_err()
        True
        >>> machine.state
        <OrderState.REGISTERED: 'Registered'>
    """

    def __init__(
        self,
        initial_state: OrderState = INITIAL_STATE,
        transitions: Optional[Dict[OrderState, Dict[OrderTrigger, OrderState]]] = None,
    ):
        """Initialize the order state machine.

        Args:
            initial_state: State the order starts in (default: NEW).
            transitions: Optional custom transition table. Defaults to ORDER_TRANSITIONS.
        """
        self._initial_state = initial_state
        self._state = initial_state
        self._transitions = transitions if transitions is not None else ORDER_TRANSITIONS
        self._history: List[TransitionRecord] = []

    @property
    def state(self) -> OrderState:
        """Get the current state (read-only)."""
        return self._state

    @property
    def history(self) -> List[TransitionRecord]:
        """Get a copy of the accepted transitions."""
        return list(self._history)

    @property
    def transitions(self) -> Dict[OrderState, Dict[OrderTrigger, OrderState]]:
        """Get the transition table (read-only)."""
        return self._transitions

    @property
    def is_terminal(self) -> bool:
        """True when the current state has no outgoing transitions."""
        return not self._transitions.get(self._state)

    def fire(self, trigger: OrderTrigger) -> FireResult:
        """Fire a trigger against the current state.

        Returns:
        - ok result with the new state: trigger was permitted, state changed
          (or re-entered for a self-transition)
        - error result with the unchanged state: trigger not permitted

        Args:
            trigger: The trigger to fire.

        Returns:
            FireResult describing the outcome.
        """
        if not isinstance(trigger, OrderTrigger):
            error_msg = f"Invalid trigger: {trigger!r} is not an OrderTrigger"
            logger.warning(error_msg)
            return FireResult(
                ok=False, state=self._state, code="INVALID_TRIGGER", error=error_msg
            )

        destination = self._transitions.get(self._state, {}).get(trigger)
        if destination is None:
            error_msg = (
                f"Illegal transition: trigger {trigger.value} is not permitted "
                f"in state {self._state.value}. "
                f"Permitted triggers: {[t.value for t in self.permitted_triggers()]}"
            )
            logger.warning(error_msg)
            return FireResult(
                ok=False,
                state=self._state,
                trigger=trigger,
                code="ILLEGAL_TRANSITION",
                error=error_msg,
            )

        record = TransitionRecord(source=self._state, trigger=trigger, destination=destination)
        self._history.append(record)
        self._state = destination
        logger.debug(
            f"Order transition: {record.source.value} --{trigger.value}--> {destination.value}"
        )
        return FireResult(ok=True, state=destination, trigger=trigger)

    def can_fire(self, trigger: OrderTrigger) -> bool:
        """Check if a trigger would be accepted without changing state.

        Args:
            trigger: The trigger to check.

        Returns:
            True if the trigger is permitted from the current state.
        """
        if not isinstance(trigger, OrderTrigger):
            return False
        return trigger in self._transitions.get(self._state, {})

    def permitted_triggers(self) -> List[OrderTrigger]:
        """Get the triggers accepted in the current state, in table order."""
        return list(self._transitions.get(self._state, {}))

    def reset(self) -> None:
        """Reset the machine to its initial state and clear the history."""
        self._state = self._initial_state
        self._history = []

    def __repr__(self) -> str:
        """String representation showing current state."""
        return (
            f"OrderStateMachine(state={self._state.value}, "
            f"transitions_applied={len(self._history)})"
        )


def build_order_machine() -> OrderStateMachine:
    """Create an order state machine configured with the default lifecycle."""
    return OrderStateMachine(INITIAL_STATE, ORDER_TRANSITIONS)
