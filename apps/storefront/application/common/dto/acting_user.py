"""Acting User DTO."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.enums import UserRole


@dataclass(frozen=True)
class ActingUser:
    """요청을 수행하는 사용자.

    인증은 게이트웨이가 담당하며 여기서는 전달된 헤더 값을 그대로 신뢰합니다.
    """

    user_id: int | None = None
    role: UserRole | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_site_admin(self) -> bool:
        return self.role == UserRole.SITE_ADMIN

    @property
    def can_bypass_review_interval(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.SITE_ADMIN)


ANONYMOUS = ActingUser()
