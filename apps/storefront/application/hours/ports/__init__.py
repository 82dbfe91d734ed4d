"""Hours Ports."""

from storefront.application.hours.ports.hours_gateway import (
    DeliveryTimeSlotGateway,
    HoursCommandGateway,
)

__all__ = ["DeliveryTimeSlotGateway", "HoursCommandGateway"]
