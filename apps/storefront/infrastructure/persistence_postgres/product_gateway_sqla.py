"""SQLAlchemy implementation of product gateways."""

from __future__ import annotations

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.catalog.dto import ProductSearchParams
from storefront.application.common.exceptions import ProductNotFoundError
from storefront.domain.entities import Product
from storefront.domain.enums import ProductSortColumn
from storefront.infrastructure.persistence_postgres.location_reader_sqla import (
    _LIKE_ESCAPE,
    escape_like,
)
from storefront.infrastructure.persistence_postgres.mappers import (
    apply_product,
    product_to_domain,
)
from storefront.infrastructure.persistence_postgres.models import ProductModel

_ORDER_EXPRESSIONS = {
    ProductSortColumn.ID: ProductModel.id,
    ProductSortColumn.NAME: func.lower(ProductModel.name),
    ProductSortColumn.CATEGORY: ProductModel.category,
    ProductSortColumn.CREATED: ProductModel.created,
    ProductSortColumn.MODIFIED: ProductModel.modified,
}


class SqlaProductQueryGateway:
    """상품 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_products(self, params: ProductSearchParams) -> tuple[list[Product], int]:
        total = await self._session.execute(self.build_count_query(params))
        result = await self._session.execute(self.build_list_query(params))
        items = [product_to_domain(model) for model in result.scalars().all()]
        return items, int(total.scalar_one())

    async def get_by_id(
        self,
        product_id: int,
        location_id: int | None = None,
        include_hidden: bool = False,
    ) -> Product | None:
        query = select(ProductModel).where(
            ProductModel.id == product_id,
            ProductModel.deleted.is_(False),
        )
        if location_id is not None:
            query = query.where(ProductModel.location_id == location_id)
        if not include_hidden:
            query = query.where(ProductModel.hidden.is_(False))
        result = await self._session.execute(query)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return product_to_domain(model)

    @classmethod
    def build_list_query(cls, params: ProductSearchParams) -> Select:
        clauses = []
        for spec in params.order:
            expression = _ORDER_EXPRESSIONS[spec.column]
            ordered = expression.desc() if spec.descending else expression.asc()
            clauses.append(ordered.nulls_last())
        if all(spec.column != ProductSortColumn.ID for spec in params.order):
            clauses.append(ProductModel.id.asc())
        return (
            select(ProductModel)
            .where(*cls._conditions(params))
            .order_by(*clauses)
            .offset(params.page * params.limit)
            .limit(params.limit)
        )

    @classmethod
    def build_count_query(cls, params: ProductSearchParams) -> Select:
        return select(func.count()).select_from(ProductModel).where(*cls._conditions(params))

    @staticmethod
    def _conditions(params: ProductSearchParams) -> list:
        conditions = []
        if params.location_id is not None:
            conditions.append(ProductModel.location_id == params.location_id)
        if not params.include_deleted:
            conditions.append(ProductModel.deleted.is_(False))
        if not params.include_hidden:
            conditions.append(ProductModel.hidden.is_(False))
        if not params.include_all_stock:
            conditions.append(ProductModel.is_in_stock.is_(True))
        if params.category:
            conditions.append(func.lower(ProductModel.category) == params.category.lower())
        if params.search:
            pattern = escape_like(params.search)
            conditions.append(
                or_(
                    ProductModel.name.ilike(pattern, escape=_LIKE_ESCAPE),
                    ProductModel.description.ilike(pattern, escape=_LIKE_ESCAPE),
                    ProductModel.strain_name.ilike(pattern, escape=_LIKE_ESCAPE),
                )
            )
        return conditions


class SqlaProductCommandGateway:
    """상품 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, product: Product) -> Product:
        model = apply_product(ProductModel(), product)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return product_to_domain(model)

    async def update(self, product: Product) -> Product:
        model = await self._get_model(product.id)
        apply_product(model, product)
        await self._session.flush()
        return product_to_domain(model)

    async def soft_delete(self, product_id: int, modified_by: int | None = None) -> None:
        model = await self._get_model(product_id)
        model.deleted = True
        model.modified_by = modified_by
        await self._session.flush()

    async def _get_model(self, product_id: int | None) -> ProductModel:
        result = await self._session.execute(
            select(ProductModel).where(ProductModel.id == product_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            raise ProductNotFoundError()
        return model
