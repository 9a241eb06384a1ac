"""
app/repositories/artwork_sale_repository.py

Read-only query layer over ``artwork_sales`` for the analytics tools.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from app.domain.artwork_sales import SaleFilter, SaleRecord
from db.models.artwork_sale import ArtworkSale

# (filter attribute, column, operator) for the range and exact-match fields.
_RANGE_CONDITIONS: tuple[tuple[str, Any, str], ...] = (
    ("min_height", ArtworkSale.height, ">="),
    ("max_height", ArtworkSale.height, "<="),
    ("min_width", ArtworkSale.width, ">="),
    ("max_width", ArtworkSale.width, "<="),
    ("year_created_from", ArtworkSale.year_created, ">="),
    ("year_created_to", ArtworkSale.year_created, "<="),
    ("sale_date_from", ArtworkSale.sale_date, ">="),
    ("sale_date_to", ArtworkSale.sale_date, "<="),
    ("min_low_estimate", ArtworkSale.low_estimate, ">="),
    ("max_low_estimate", ArtworkSale.low_estimate, "<="),
    ("min_high_estimate", ArtworkSale.high_estimate, ">="),
    ("max_high_estimate", ArtworkSale.high_estimate, "<="),
    ("min_hammer_price", ArtworkSale.hammer_price, ">="),
    ("max_hammer_price", ArtworkSale.hammer_price, "<="),
)

_SUBSTRING_CONDITIONS: tuple[tuple[str, Any], ...] = (
    ("name", ArtworkSale.name),
    ("technique", ArtworkSale.technique),
    ("category", ArtworkSale.category),
)


def _to_record(row: ArtworkSale) -> SaleRecord:
    return SaleRecord(
        sale_date=row.sale_date,
        hammer_price=row.hammer_price,
        low_estimate=row.low_estimate,
        high_estimate=row.high_estimate,
        height=row.height,
        width=row.width,
        sold=row.sold,
        name=row.name or "",
        category=row.category,
        technique=row.technique,
        currency=row.currency,
        year_created=row.year_created,
        artist_id=row.artist_id,
    )


class ArtworkSaleRepository:
    """
    Applies a :class:`SaleFilter` to ``artwork_sales`` and returns
    immutable :class:`SaleRecord` values.  Never writes.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def count(self, sale_filter: SaleFilter) -> int:
        stmt = self._apply_filter(select(func.count(ArtworkSale.id)), sale_filter)
        return int(self._session.scalar(stmt) or 0)

    def list_page(self, sale_filter: SaleFilter, *, skip: int, limit: int) -> list[SaleRecord]:
        """One page of matching sales, newest first."""
        stmt = (
            self._apply_filter(select(ArtworkSale), sale_filter)
            .order_by(ArtworkSale.sale_date.desc(), ArtworkSale.id)
            .offset(skip)
            .limit(limit)
        )
        return [_to_record(row) for row in self._session.scalars(stmt).all()]

    def list_all(self, sale_filter: SaleFilter) -> list[SaleRecord]:
        """Every matching sale, oldest first."""
        stmt = self._apply_filter(select(ArtworkSale), sale_filter).order_by(
            ArtworkSale.sale_date.asc(), ArtworkSale.id
        )
        return [_to_record(row) for row in self._session.scalars(stmt).all()]

    def list_categories(self) -> list[str]:
        stmt = (
            select(ArtworkSale.category)
            .where(ArtworkSale.category.is_not(None), ArtworkSale.category != "")
            .distinct()
            .order_by(ArtworkSale.category)
        )
        return list(self._session.scalars(stmt).all())

    @staticmethod
    def _apply_filter(stmt: Select, sale_filter: SaleFilter) -> Select:
        conditions: list[Any] = []

        if sale_filter.artist_id is not None:
            conditions.append(ArtworkSale.artist_id == sale_filter.artist_id)

        for attribute, column in _SUBSTRING_CONDITIONS:
            value = getattr(sale_filter, attribute)
            if value:
                conditions.append(column.contains(value, autoescape=True))

        for attribute, column, operator in _RANGE_CONDITIONS:
            value = getattr(sale_filter, attribute)
            if value is None:
                continue
            conditions.append(column >= value if operator == ">=" else column <= value)

        if sale_filter.currency:
            conditions.append(ArtworkSale.currency == sale_filter.currency)
        if sale_filter.sold is not None:
            conditions.append(ArtworkSale.sold.is_(sale_filter.sold))

        if conditions:
            stmt = stmt.where(*conditions)
        return stmt
