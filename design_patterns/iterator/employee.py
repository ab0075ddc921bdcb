"""Employee records and the OrgChart arena.

Employees live in a flat list owned by an OrgChart and refer to each other
by integer handle (their index in that list) instead of by object
reference. A handle is stable for the life of the chart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

import pydantic as pd

if TYPE_CHECKING:
    from design_patterns.iterator.org_iterator import OrgTreeIterator


class Employee(pd.BaseModel):
    """A node of the organisation tree.

    Records are frozen; only the owning OrgChart links new underlings, by
    replacing the boss record.

    Attributes:
        name: Display name; not required to be unique
        boss: Handle of the parent employee, None for the root
        underlings: Handles of direct reports, in insertion order
    """

    name: str
    boss: Optional[int] = None
    underlings: Tuple[int, ...] = ()

    model_config = pd.ConfigDict(extra="ignore", frozen=True)

    def __repr__(self) -> str:
        return (
            f"Employee(name={self.name!r}, boss={self.boss!r}, "
            f"underlings={len(self.underlings)})"
        )


def _is_handle(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class OrgChart:
    """Arena of Employee records forming a single rooted tree.

    The first employee added without a boss becomes the root. Every later
    employee must be attached to an existing boss when it is added, so the
    structure can never contain a cycle or a node with two parents.

    Iterating an OrgChart yields its employees in pre-order.

    Example:
        >>> chart = OrgChart()
        >>> boss = chart.add_employee("Boss")
        >>> emp = chart.add_employee("Employee 1", boss=boss)
        >>> [e.name for e in chart]
        ['Boss', 'Employee 1']
    """

    def __init__(self) -> None:
        self._employees: List[Employee] = []
        self._root: Optional[int] = None

    @property
    def root(self) -> int:
        """Handle of the root employee.

        Raises:
            ValueError: If the chart is empty.
        """
        if self._root is None:
            raise ValueError("OrgChart is empty: no root employee")
        return self._root

    def add_employee(self, name: str, boss: Optional[int] = None) -> int:
        """Add an employee, optionally under an existing boss.

        Args:
            name: Employee display name.
            boss: Handle of the boss, or None to create the root.

        Returns:
            Handle of the new employee.

        Raises:
            KeyError: If boss is not a handle of this chart.
            ValueError: If boss is None and the chart already has a root.
        """
        handle = len(self._employees)
        if boss is None:
            if self._root is not None:
                raise ValueError(
                    f"OrgChart already has a root ({self._employees[self._root].name!r}); "
                    f"pass boss= to add {name!r}"
                )
            self._employees.append(Employee(name=name))
            self._root = handle
            return handle

        boss_record = self.get(boss)
        self._employees.append(Employee(name=name, boss=boss))
        self._employees[boss] = boss_record.model_copy(
            update={"underlings": boss_record.underlings + (handle,)}
        )
        return handle

    def get(self, handle: int) -> Employee:
        """Return the employee stored under handle.

        Raises:
            KeyError: If handle is not a handle of this chart.
        """
        if not _is_handle(handle) or not 0 <= handle < len(self._employees):
            raise KeyError(f"Unknown employee handle: {handle!r}")
        return self._employees[handle]

    def __getitem__(self, handle: int) -> Employee:
        return self.get(handle)

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, handle: object) -> bool:
        return _is_handle(handle) and 0 <= handle < len(self._employees)

    def iterator(self, root: Optional[int] = None) -> "OrgTreeIterator":
        """Create a cursor over the whole chart or over the sub-tree at root."""
        from design_patterns.iterator.org_iterator import OrgTreeIterator

        return OrgTreeIterator(self, root)

    def __iter__(self) -> Iterator[Employee]:
        return self.iterator()

    def __repr__(self) -> str:
        return f"OrgChart(employees={len(self._employees)}, root={self._root!r})"
