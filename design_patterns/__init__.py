"""Classic behavioral design patterns: an organisation tree iterator and an
order lifecycle state machine, with a sample runner."""

from design_patterns.fsm import (
    FireResult,
    IllegalTransitionError,
    OrderState,
    OrderStateMachine,
    OrderTrigger,
    build_order_machine,
)
from design_patterns.iterator import Employee, OrgChart, OrgTreeIterator

__all__ = [
    "FireResult",
    "IllegalTransitionError",
    "OrderState",
    "OrderStateMachine",
    "OrderTrigger",
    "build_order_machine",
    "Employee",
    "OrgChart",
    "OrgTreeIterator",
]
