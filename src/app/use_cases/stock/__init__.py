"""Stock ledger use cases"""
from .receive_supply import ReceiveSupply
from .place_order_line import PlaceOrderLine
from .update_order_line import UpdateOrderLine
from .cancel_order_line import CancelOrderLine
from .revise_supply import UpdateSuppliedItem, DeleteSuppliedItem
from .list_order_lines import ListOrderLines
from .supplied_items import GetSuppliedItem, ListSuppliedItems
from .dtos import (
    ReceiveSupplyCommandDTO,
    UpdateSupplyCommandDTO,
    SupplyReceiptResponseDTO,
    PlaceOrderLineCommandDTO,
    UpdateOrderLineCommandDTO,
    OrderLineResponseDTO,
    OrderLinesResponseDTO,
)

__all__ = [
    "ReceiveSupply",
    "PlaceOrderLine",
    "UpdateOrderLine",
    "CancelOrderLine",
    "UpdateSuppliedItem",
    "DeleteSuppliedItem",
    "ListOrderLines",
    "GetSuppliedItem",
    "ListSuppliedItems",
    "ReceiveSupplyCommandDTO",
    "UpdateSupplyCommandDTO",
    "SupplyReceiptResponseDTO",
    "PlaceOrderLineCommandDTO",
    "UpdateOrderLineCommandDTO",
    "OrderLineResponseDTO",
    "OrderLinesResponseDTO",
]
