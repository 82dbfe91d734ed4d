"""검색 관련 예외."""

from storefront.application.common.exceptions.base import ApplicationError
from storefront.domain.enums import ErrorKind


class InvalidStartingCoordinatesError(ApplicationError):
    """출발 좌표 중 하나만 주어짐."""

    code = "INVALID_STARTING_COORDINATES"
    localized = {
        "es-PR": (
            "Las coordenadas de inicio para la clasificación de las ubicaciones "
            "más cercanas están incompletas."
        )
    }

    def __init__(self) -> None:
        super().__init__("Starting coordinates for sorting nearest locations are incomplete.")


class StartingLocationRequiredError(ApplicationError):
    """가장 가까운 위치 조회에 출발 좌표가 없음."""

    code = "STARTING_LOCATION_REQUIRED"
    localized = {"es-PR": "Proporcione su ubicación inicial."}

    def __init__(self) -> None:
        super().__init__("Please provide your starting location.")


class NearestLocationNotFoundError(ApplicationError):
    """반경 내 위치 없음."""

    kind = ErrorKind.NOT_FOUND
    code = "NEAREST_LOCATION_NOT_FOUND"
    localized = {"es-PR": "No hay ubicaciones cercanas."}

    def __init__(self) -> None:
        super().__init__("No nearby location.")


class InvalidOrderError(ApplicationError):
    """정렬 표현식이 허용된 컬럼/방향이 아님."""

    code = "INVALID_ORDER"

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid order '{value}'. Allowed columns: {allowed}.")
