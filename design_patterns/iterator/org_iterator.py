"""OrgTreeIterator: restartable external cursor over an OrgChart.

The cursor walks the tree in pre-order without recursion and without a
traversal stack. For every employee it remembers which underling it last
descended into; once an employee's underlings are exhausted it climbs back
to the boss and resumes from the boss's next underling.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from design_patterns.iterator.employee import Employee, OrgChart

logger = logging.getLogger(__name__)

# Child index meaning "no underling visited yet"
_NOT_VISITED = -1


class OrgTreeIterator:
    """Stateful pre-order cursor over an OrgChart.

    Each cursor keeps its own child-index memory, a list parallel to the
    chart's arena, so any number of cursors can walk the same chart at the
    same time. A single cursor is not thread-safe.

    The chart must not be modified while a traversal is in progress; adding
    employees between traversals is fine.

    Attributes:
        chart: The OrgChart being traversed.
        root: Handle the traversal starts from and ends at.
        current: Handle of the employee the cursor points at.
        started: Whether advance() has been called since the last reset().

    Example:
        >>> cursor = chart.iterator()
        >>> while cursor.advance():
        ...     print(cursor.current_employee.name)
    """

    def __init__(self, chart: OrgChart, root: Optional[int] = None):
        """Bind a cursor to a chart.

        Args:
            chart: The chart to traverse.
            root: Handle of the sub-tree root. Defaults to the chart's root.

        Raises:
            ValueError: If root is None and the chart is empty.
            KeyError: If root is not a handle of the chart.
        """
        self._chart = chart
        self._root = chart.root if root is None else root
        chart.get(self._root)
        self._current = self._root
        self._last_child: List[int] = []
        self._started = False

    @property
    def chart(self) -> OrgChart:
        return self._chart

    @property
    def root(self) -> int:
        return self._root

    @property
    def current(self) -> int:
        """Handle of the current employee (read-only)."""
        return self._current

    @property
    def current_employee(self) -> Employee:
        """Record of the current employee (read-only)."""
        return self._chart.get(self._current)

    @property
    def started(self) -> bool:
        return self._started

    def advance(self) -> bool:
        """Move the cursor to the next employee in pre-order.

        The first call after construction or reset() lands on the root.
        Climbing back up through bosses happens inside a single call and is
        never reported to the caller.

        Returns:
            True if the cursor moved to an employee, False once the sub-tree
            is exhausted. Keeps returning False until reset().
        """
        if not self._started:
            self._started = True
            self._current = self._root
            return True

        if len(self._last_child) < len(self._chart):
            self._last_child.extend(
                [_NOT_VISITED] * (len(self._chart) - len(self._last_child))
            )

        while True:
            employee = self._chart.get(self._current)
            next_index = self._last_child[self._current] + 1
            if next_index < len(employee.underlings):
                self._last_child[self._current] = next_index
                self._current = employee.underlings[next_index]
                return True

            if employee.boss is not None and self._current != self._root:
                self._current = employee.boss
                continue

            return False

    def reset(self) -> None:
        """Return the cursor to its pre-start condition."""
        self._current = self._root
        self._last_child = []
        self._started = False
        logger.debug(f"OrgTreeIterator reset to root {self._chart.get(self._root).name!r}")

    def __iter__(self) -> "OrgTreeIterator":
        return self

    def __next__(self) -> Employee:
        if not self.advance():
            raise StopIteration
        return self.current_employee

    def __repr__(self) -> str:
        return (
            f"OrgTreeIterator(root={self._root}, current={self._current}, "
            f"started={self._started})"
        )
