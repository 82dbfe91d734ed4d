"""Common DTOs."""

from storefront.application.common.dto.acting_user import ANONYMOUS, ActingUser

__all__ = ["ANONYMOUS", "ActingUser"]
