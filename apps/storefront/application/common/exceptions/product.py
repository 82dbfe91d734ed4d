"""상품 관련 예외."""

from storefront.application.common.exceptions.base import ApplicationError
from storefront.domain.enums import ErrorKind


class ProductNotFoundError(ApplicationError):
    """상품을 찾을 수 없음 (다른 위치의 상품 포함)."""

    kind = ErrorKind.NOT_FOUND
    code = "PRODUCT_NOT_FOUND"
    localized = {"es-PR": "Producto no encontrado."}

    def __init__(self) -> None:
        super().__init__("Product not found.")
