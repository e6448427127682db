"""FAQ persistence plus the listing filters used by the public and admin pages."""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_
from typing import Any, Dict, List, Optional
import logging
import math

from ecoevents.config import settings
from ecoevents.exceptions import NotFoundError, ValidationFailedError
from ecoevents.models.faq import Faq
from ecoevents.schemas.faq import FaqCreateSchema, FaqUpdateSchema, FaqReorderItemSchema

logger = logging.getLogger(__name__)


def _ordered(query):
    # id breaks ties so the order is total and pages stay stable
    return query.order_by(Faq.order.asc(), Faq.id.asc())


def _filtered(query, category: Optional[str] = None, active: Optional[bool] = None, search: Optional[str] = None):
    if category:
        query = query.where(Faq.category == category)
    if active is not None:
        query = query.where(Faq.active == active)
    if search and search.strip():
        term = search.strip().lower()
        # lower(column) LIKE %term% with wildcards in the term escaped
        query = query.where(
            or_(
                Faq.question.icontains(term, autoescape=True),
                Faq.answer.icontains(term, autoescape=True),
            )
        )
    return query


async def get_faq_by_id(db: AsyncSession, faq_id: int) -> Faq:
    faq = await db.get(Faq, faq_id)
    if faq is None:
        raise NotFoundError("Faq", faq_id)
    return faq


async def list_faqs(
    db: AsyncSession,
    category: Optional[str] = None,
    active: Optional[bool] = None,
    search: Optional[str] = None,
    page: int = 1,
    page_size: int = settings.DEFAULT_PAGE_SIZE,
) -> Dict[str, Any]:
    """Filtered, ordered page of FAQs.

    ``total`` and ``last_page`` are computed from the same filtered query at
    call time; there is no snapshot across page requests.
    """
    query = _filtered(select(Faq), category, active, search)

    total = (await db.execute(select(func.count()).select_from(query.subquery()))).scalar_one()
    result = await db.execute(
        _ordered(query).offset((page - 1) * page_size).limit(page_size)
    )
    return {
        "items": result.scalars().all(),
        "page": page,
        "last_page": max(1, math.ceil(total / page_size)),
        "page_size": page_size,
        "total": total,
    }


async def get_public_faqs(db: AsyncSession) -> List[Faq]:
    result = await db.execute(_ordered(_filtered(select(Faq), active=True)))
    return result.scalars().all()


async def get_public_faqs_by_category(db: AsyncSession, category: str) -> List[Faq]:
    query = _filtered(select(Faq), active=True).where(Faq.category == category)
    result = await db.execute(_ordered(query))
    return result.scalars().all()


async def get_categories(db: AsyncSession) -> List[str]:
    result = await db.execute(
        select(Faq.category)
        .where(Faq.category.is_not(None), Faq.category != "")
        .distinct()
        .order_by(Faq.category.asc())
    )
    return result.scalars().all()


async def create_faq(db: AsyncSession, faq_in: FaqCreateSchema) -> Faq:
    db_faq = Faq(**faq_in.model_dump())
    db.add(db_faq)
    await db.commit()
    await db.refresh(db_faq)
    return db_faq


async def update_faq(db: AsyncSession, faq_id: int, faq_in: FaqUpdateSchema) -> Faq:
    db_faq = await get_faq_by_id(db, faq_id)
    for key, value in faq_in.model_dump(exclude_unset=True).items():
        setattr(db_faq, key, value)
    await db.commit()
    await db.refresh(db_faq)
    return db_faq


async def delete_faq(db: AsyncSession, faq_id: int) -> None:
    db_faq = await get_faq_by_id(db, faq_id)
    await db.delete(db_faq)
    await db.commit()


async def toggle_faq_status(db: AsyncSession, faq_id: int) -> Faq:
    db_faq = await get_faq_by_id(db, faq_id)
    db_faq.active = not db_faq.active
    await db.commit()
    await db.refresh(db_faq)
    return db_faq


async def reorder_faqs(db: AsyncSession, items: List[FaqReorderItemSchema]) -> int:
    """Apply a batch of (id, order) pairs in a single commit.

    Every id is checked before anything is written. If any is missing the
    batch is rejected as a whole and the errors name each failing item.
    Returns the number of distinct FAQs updated.
    """
    ids = {item.id for item in items}
    result = await db.execute(select(Faq).where(Faq.id.in_(ids)))
    faqs_by_id = {faq.id: faq for faq in result.scalars().all()}

    errors = [
        {
            "loc": ["body", "items", index, "id"],
            "msg": f"Faq with id {item.id} not found.",
            "type": "not_found",
        }
        for index, item in enumerate(items)
        if item.id not in faqs_by_id
    ]
    if errors:
        logger.warning(f"Rejected FAQ reorder batch of {len(items)} item(s): {len(errors)} unknown id(s).")
        raise ValidationFailedError(errors)

    for item in items:
        faqs_by_id[item.id].order = item.order
    await db.commit()
    return len(faqs_by_id)
