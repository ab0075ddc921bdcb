"""Shared pytest fixtures for design_patterns tests."""

from typing import List

import pytest
from rich.console import Console

from design_patterns.fsm import OrderStateMachine, OrderTrigger, build_order_machine
from design_patterns.iterator import OrgChart
from design_patterns.samples.iterator_sample import build_demo_org_chart


DEMO_PREORDER = [
    "Boss",
    "Employee 1",
    "Emp 1.1",
    "Emp 1.2",
    "Emp 1.3",
    "Emp 1.3.1",
    "Emp 1.3.2",
    "Emp 1.3.3",
    "Emp 1.4",
    "Employee 2",
    "Emp 2.1",
]


def recursive_preorder(chart: OrgChart, handle: int) -> List[int]:
    """Reference pre-order walk used to check the cursor's output."""
    order = [handle]
    for child in chart[handle].underlings:
        order.extend(recursive_preorder(chart, child))
    return order


def drain(cursor) -> List[int]:
    """Advance a cursor until exhausted, returning the visited handles."""
    visited = []
    while cursor.advance():
        visited.append(cursor.current)
    return visited


def fire_all(machine: OrderStateMachine, *triggers: OrderTrigger) -> None:
    """Fire triggers in order, failing the test on the first rejection."""
    for trigger in triggers:
        result = machine.fire(trigger)
        assert result.is_ok(), result.error


@pytest.fixture
def demo_chart() -> OrgChart:
    """The organisation chart printed by the iterator sample."""
    return build_demo_org_chart()


@pytest.fixture
def wide_chart() -> OrgChart:
    """A root with five leaf underlings, two of them sharing a name."""
    chart = OrgChart()
    root = chart.add_employee("Root")
    for name in ["A", "B", "Twin", "Twin", "C"]:
        chart.add_employee(name, boss=root)
    return chart


@pytest.fixture
def deep_chart() -> OrgChart:
    """A single chain of ten employees."""
    chart = OrgChart()
    parent = chart.add_employee("Level 0")
    for level in range(1, 10):
        parent = chart.add_employee(f"Level {level}", boss=parent)
    return chart


@pytest.fixture
def machine() -> OrderStateMachine:
    """A fresh order machine in the NEW state."""
    return build_order_machine()


@pytest.fixture
def console() -> Console:
    """A console that records output instead of writing to a terminal."""
    return Console(record=True, width=200, no_color=True, highlight=False)
