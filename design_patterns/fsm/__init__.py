"""Finite state machine package for the order lifecycle sample.

This package provides the order states, triggers, transition table and the
OrderStateMachine that enforces them.
"""

from design_patterns.fsm.order_fsm import ORDER_TRANSITIONS, OrderStateMachine, build_order_machine
from design_patterns.fsm.order_state import INITIAL_STATE, TERMINAL_STATES, OrderState, OrderTrigger
from design_patterns.fsm.transition import FireResult, IllegalTransitionError, TransitionRecord

__all__ = [
    "ORDER_TRANSITIONS",
    "OrderStateMachine",
    "build_order_machine",
    "INITIAL_STATE",
    "TERMINAL_STATES",
    "OrderState",
    "OrderTrigger",
    "FireResult",
    "IllegalTransitionError",
    "TransitionRecord",
]
