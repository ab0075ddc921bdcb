"""Behavioral - Iterator.

Iterator lets you traverse the elements of a collection without exposing
its underlying representation (list, stack, tree, etc.).

Use it:
- when your collection has a complex data structure under the hood, but you
  want to hide its complexity from clients.
- to reduce duplication of the traversal code across your app.
- when your code must traverse different data structures, or structures
  whose types are not known beforehand.
"""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from design_patterns.iterator import OrgChart


def build_demo_org_chart() -> OrgChart:
    """Build the sample organisation: a boss with two levels of underlings."""
    chart = OrgChart()
    boss = chart.add_employee("Boss")

    emp1 = chart.add_employee("Employee 1", boss=boss)
    chart.add_employee("Emp 1.1", boss=emp1)
    chart.add_employee("Emp 1.2", boss=emp1)
    emp13 = chart.add_employee("Emp 1.3", boss=emp1)
    chart.add_employee("Emp 1.3.1", boss=emp13)
    chart.add_employee("Emp 1.3.2", boss=emp13)
    chart.add_employee("Emp 1.3.3", boss=emp13)
    chart.add_employee("Emp 1.4", boss=emp1)

    emp2 = chart.add_employee("Employee 2", boss=boss)
    chart.add_employee("Emp 2.1", boss=emp2)
    return chart


def run_iterator_sample(console: Console, chart: Optional[OrgChart] = None) -> List[str]:
    """Print every employee of an organisation in pre-order.

    Args:
        console: Console to print to
        chart: Organisation to walk; defaults to the demo organisation

    Returns:
        Employee names in the order they were printed
    """
    console.print("[bold]Behavioral - Iterator[/bold]")

    names = []
    if chart is None:
        chart = build_demo_org_chart()
    for employee in chart:
        console.print(f"employee {escape(employee.name)}")
        names.append(employee.name)
    return names
