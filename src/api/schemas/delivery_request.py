"""Request schemas for Delivery API"""

from datetime import time
from pydantic import BaseModel, Field
from src.domain.delivery import DeliveryState


class RecordDeliveryRequestSchema(BaseModel):
    delivery_no: int = Field(..., gt=0, description="Delivery number")
    order_no: int = Field(..., gt=0, description="Order to deliver")
    employee_no: int = Field(..., gt=0, description="Delivering employee")
    status: DeliveryState = Field(default=DeliveryState.PENDING, description="Pending or Delivered")
    expected_time: time = Field(..., description="Expected delivery time (HH:MM[:SS])")


class UpdateDeliveryRequestSchema(BaseModel):
    status: DeliveryState = Field(..., description="Pending or Delivered")
    expected_time: time = Field(..., description="Expected delivery time (HH:MM[:SS])")
