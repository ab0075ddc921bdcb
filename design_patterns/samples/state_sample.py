"""Behavioral - State.

State lets an object alter its behavior when its internal state changes.
It appears as if the object changed its class.

Use it when:
- an object behaves differently depending on its current state, the number
  of states is large, and the state-specific code changes frequently.
- a class is polluted with conditionals that switch behavior on the
  current values of its fields.
- similar states and transitions of a condition-based state machine share
  a lot of duplicate code.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from rich.console import Console
from rich.markup import escape

from design_patterns.fsm import OrderState, OrderTrigger, build_order_machine

logger = logging.getLogger(__name__)

# Happy path from a fresh order to delivery.
# DELIVERING may be swapped for RETURN_BY_CUSTOMER or RETURN_BY_SHIPMENT.
DEMO_TRIGGERS: Sequence[OrderTrigger] = (
    OrderTrigger.CREATE_ORDER,
    OrderTrigger.REGISTER_ORDER,
    OrderTrigger.BEGIN_PROCESSING,
    OrderTrigger.PACKAGING,
    OrderTrigger.SHIPPING,
    OrderTrigger.DELIVERING,
)

# States the driver double-checks after specific triggers
EXPECTED_STATES: Dict[OrderTrigger, OrderState] = {
    OrderTrigger.CREATE_ORDER: OrderState.NEW,
    OrderTrigger.REGISTER_ORDER: OrderState.REGISTERED,
}


def run_state_sample(
    console: Console, triggers: Sequence[OrderTrigger] = DEMO_TRIGGERS
) -> List[OrderState]:
    """Drive an order through the lifecycle, printing the state after each trigger.

    Args:
        console: Console to print to
        triggers: Triggers to fire in order (default: the delivery happy path)

    Returns:
        The state after each trigger
    """
    console.print("[bold]Behavioral - State[/bold]")

    machine = build_order_machine()
    visited: List[OrderState] = []

    for trigger in triggers:
        result = machine.fire(trigger)
        if result.is_err():
            console.print(f"[red]{escape(result.error or '')}[/red]")
        console.print(f"state: {machine.state.value}")
        visited.append(machine.state)

        expected = EXPECTED_STATES.get(trigger)
        if expected is not None and machine.state != expected:
            console.print(
                f"[yellow]Error with order state trigger {trigger.value} "
                f"- state {machine.state.value}[/yellow]"
            )

    logger.debug(
        f"State sample finished in {machine.state.value} "
        f"after {len(machine.history)} transitions"
    )
    return visited
