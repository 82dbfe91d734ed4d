"""Hours Services."""

from storefront.application.hours.services.hour_rule_validator import (
    HourRuleValidator,
    parse_time_of_day,
)

__all__ = ["HourRuleValidator", "parse_time_of_day"]
