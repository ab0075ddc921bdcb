"""Organisation tree and its pre-order cursor."""

from design_patterns.iterator.employee import Employee, OrgChart
from design_patterns.iterator.org_iterator import OrgTreeIterator

__all__ = ["Employee", "OrgChart", "OrgTreeIterator"]
