"""Location 도메인 예외."""

from storefront.domain.enums import ErrorKind
from storefront.domain.exceptions.base import DomainError


class LocationNotFoundError(DomainError):
    """장소를 찾을 수 없음."""

    kind = ErrorKind.NOT_FOUND
    code = "LOCATION_NOT_FOUND"
    localized = {"es-PR": "Ubicación no encontrada."}

    def __init__(self) -> None:
        super().__init__("Error: Location not found.")


class InvalidCoordinatesError(DomainError):
    """좌표 형식 또는 범위 오류."""

    code = "INVALID_COORDINATES"
    localized = {"es-PR": "Coordenadas inválidas."}

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__("Invalid coordinates.")
