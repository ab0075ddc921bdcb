"""Order state and trigger enumerations for the order lifecycle FSM.

This module provides the closed vocabulary of states an order can be in and
the triggers that move it between them.
"""

from enum import Enum
from typing import FrozenSet


class OrderState(Enum):
    """Purchase order lifecycle states.

    States represent the phases of an order:
    - NEW: Order object exists but nothing has been recorded yet
    - DRAFT: Order was saved for later completion
    - REGISTERED: Order was accepted into the system
    - PROCESSING: Supplier is working on the order
    - PACKAGED: Goods are packed and ready for shipment
    - SHIPPED: Goods left the warehouse
    - COMPLETED: Goods were delivered
    - CANCELLED: Order was cancelled by the customer or the supplier
    - RETURNED_BY_SHIPMENT: Carrier sent the goods back
    - RETURNED_BY_CUSTOMER: Customer sent the goods back

    Enum values match the names printed by the sample runner.
    """

    NEW = "New"
    DRAFT = "Draft"
    REGISTERED = "Registered"
    PROCESSING = "Processing"
    PACKAGED = "Packaged"
    SHIPPED = "Shipped"
    COMPLETED = "Completed"
    # other states
    CANCELLED = "Cancelled"
    RETURNED_BY_SHIPMENT = "ReturnedByShipment"
    RETURNED_BY_CUSTOMER = "ReturnedByCustomer"


class OrderTrigger(Enum):
    """Events that may move an order from one state to another."""

    CREATE_ORDER = "CreateOrder"
    SAVE_AS_DRAFT = "SaveAsDraft"
    REGISTER_ORDER = "RegisterOrder"
    CANCELL_BY_CUSTOMER = "CancellByCustomer"
    CANCELL_BY_SUPPLIER = "CancellBySupplier"
    BEGIN_PROCESSING = "BeginProcessing"
    PACKAGING = "Packaging"
    SHIPPING = "Shipping"
    DELIVERING = "Delivering"
    RETURN_BY_SHIPMENT = "ReturnByShipment"
    RETURN_BY_CUSTOMER = "ReturnByCustomer"


INITIAL_STATE: OrderState = OrderState.NEW

# Absorbing states: no outgoing rows in the transition table
TERMINAL_STATES: FrozenSet[OrderState] = frozenset(
    [
        OrderState.COMPLETED,
        OrderState.CANCELLED,
        OrderState.RETURNED_BY_SHIPMENT,
        OrderState.RETURNED_BY_CUSTOMER,
    ]
)
