"""Data Transfer Objects for Delivery Use Cases"""

from datetime import time
from pydantic import BaseModel, Field
from src.domain.delivery import DeliveryState


class RecordDeliveryCommandDTO(BaseModel):
    """
    Command DTO for assigning a delivery

    Creates both the delivery row and the order's status row.
    """

    delivery_no: int = Field(..., description="Delivery number (client assigned)")
    order_no: int = Field(..., description="Order to deliver")
    employee_no: int = Field(..., description="Delivering employee")
    status: DeliveryState = Field(default=DeliveryState.PENDING, description="Initial status")
    expected_time: time = Field(..., description="Expected delivery time")

    class Config:
        json_schema_extra = {
            "example": {
                "delivery_no": 301,
                "order_no": 5001,
                "employee_no": 4,
                "status": "Pending",
                "expected_time": "17:30:00"
            }
        }


class UpdateDeliveryStatusCommandDTO(BaseModel):
    delivery_no: int = Field(..., description="Delivery number")
    status: DeliveryState = Field(..., description="New status")
    expected_time: time = Field(..., description="Expected delivery time")


class DeliveryResponseDTO(BaseModel):
    delivery_no: int = Field(..., description="Delivery number")
    order_no: int = Field(..., description="Order delivered")
    employee_no: int = Field(..., description="Delivering employee")
    status: DeliveryState = Field(..., description="Delivery status")
    expected_time: time = Field(..., description="Expected delivery time")
