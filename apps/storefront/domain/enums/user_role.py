"""User Role Enum."""

from enum import Enum


class UserRole(str, Enum):
    """요청 헤더로 전달되는 사용자 역할."""

    ADMIN = "admin"
    SITE_ADMIN = "site_admin"
    USER = "user"
