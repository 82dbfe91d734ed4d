"""Hours DTOs."""

from storefront.application.hours.dto.hour_inputs import HourRuleInput, TimeSlotInput

__all__ = ["HourRuleInput", "TimeSlotInput"]
