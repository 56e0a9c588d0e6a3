"""Delivery Domain Entities

A delivery and its status row are written together.
"""

from datetime import time
from enum import Enum
from sqlmodel import Field, Column
from sqlalchemy import ForeignKey, Integer, Time
from src.domain.base import BaseModel


class DeliveryState(str, Enum):
    """Delivery progress"""
    PENDING = "Pending"
    DELIVERED = "Delivered"


class Delivery(BaseModel, table=True):
    """
    Delivery - Assignment of an order to a delivering employee

    Domain Rules:
    - One delivery per order
    - Always accompanied by a DeliveryStatus row for the same order
    """

    __tablename__ = "deliveries"

    delivery_no: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=False),
        description="Delivery number (client assigned)"
    )

    order_no: int = Field(
        sa_column=Column(Integer, ForeignKey("orders.order_no"), nullable=False, unique=True),
        description="Order being delivered"
    )

    employee_no: int = Field(
        description="Delivering employee reference"
    )


class DeliveryStatus(BaseModel, table=True):
    """Current status and expected time for an order's delivery"""

    __tablename__ = "delivery_statuses"

    order_no: int = Field(
        sa_column=Column(Integer, ForeignKey("orders.order_no"), primary_key=True, autoincrement=False),
        description="Order being delivered"
    )

    status: DeliveryState = Field(
        default=DeliveryState.PENDING,
        description="Delivery status"
    )

    expected_time: time = Field(
        sa_column=Column(Time, nullable=False),
        description="Expected delivery time"
    )

    employee_no: int = Field(
        description="Delivering employee reference"
    )
