from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from ecoevents.config import settings
from ecoevents.crud import faq_crud
from ecoevents.database import get_db
from ecoevents.exceptions import (
    NotFoundError,
    ValidationFailedError,
    internal_error_http,
    not_found_http,
    validation_http,
)
from ecoevents.query_params import IdPath, first_given, parse_bool_param, parse_positive_int
from ecoevents.schemas.faq import (
    FaqCreateSchema,
    FaqUpdateSchema,
    FaqResponseSchema,
    FaqPageSchema,
    FaqReorderSchema,
    FaqReorderResultSchema,
    MessageResponseSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/faqs",
    tags=["FAQs"]
)

@router.post(
    "",
    response_model=FaqResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new FAQ"
)
async def create_faq(
    faq_data: FaqCreateSchema,
    db: AsyncSession = Depends(get_db)
):
    try:
        db_faq = await faq_crud.create_faq(db, faq_data)
        logger.info(f"FAQ ID {db_faq.id} created (category: {db_faq.category}, order: {db_faq.order}).")
        return db_faq
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error creating FAQ with question '{faq_data.question}': {str(e_general)}",
            exc_info=True
        )
        raise internal_error_http("An unexpected error occurred while creating the FAQ.", e_general)

@router.get(
    "",
    response_model=FaqPageSchema,
    summary="List FAQs with filters and pagination"
)
async def list_faqs(
    db: AsyncSession = Depends(get_db),
    category: Optional[str] = None,
    active: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    categoria: Optional[str] = Query(default=None, include_in_schema=False),
    activo: Optional[str] = Query(default=None, include_in_schema=False),
    buscar: Optional[str] = Query(default=None, include_in_schema=False),
):
    try:
        active_filter = parse_bool_param(first_given(active, activo), "active")
    except ValidationFailedError as e:
        raise validation_http(e)

    page_number = parse_positive_int(page, 1, settings.MAX_PAGE)
    size = parse_positive_int(page_size, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    try:
        return await faq_crud.list_faqs(
            db,
            category=first_given(category, categoria),
            active=active_filter,
            search=first_given(search, buscar),
            page=page_number,
            page_size=size,
        )
    except Exception as e:
        logger.error(f"Error listing FAQs (page {page_number}, size {size}): {str(e)}", exc_info=True)
        raise internal_error_http("An error occurred while fetching FAQs.", e)

@router.get(
    "/public",
    response_model=List[FaqResponseSchema],
    summary="Get all active FAQs (Public)"
)
async def get_public_faqs(db: AsyncSession = Depends(get_db)):
    try:
        return await faq_crud.get_public_faqs(db)
    except Exception as e:
        logger.error(f"Error fetching public FAQs: {str(e)}", exc_info=True)
        raise internal_error_http("An error occurred while fetching FAQs.", e)

@router.get(
    "/categories",
    response_model=List[str],
    summary="Get the distinct FAQ categories (Public)"
)
async def get_faq_categories(db: AsyncSession = Depends(get_db)):
    try:
        return await faq_crud.get_categories(db)
    except Exception as e:
        logger.error(f"Error fetching FAQ categories: {str(e)}", exc_info=True)
        raise internal_error_http("An error occurred while fetching FAQ categories.", e)

@router.get(
    "/category/{category}",
    response_model=List[FaqResponseSchema],
    summary="Get active FAQs of one category (Public)"
)
async def get_public_faqs_by_category(
    category: str,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await faq_crud.get_public_faqs_by_category(db, category)
    except Exception as e:
        logger.error(f"Error fetching FAQs for category '{category}': {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while fetching FAQs for category '{category}'.", e)

@router.post(
    "/reorder",
    response_model=FaqReorderResultSchema,
    summary="Set the order of several FAQs at once"
)
async def reorder_faqs(
    reorder_data: FaqReorderSchema,
    db: AsyncSession = Depends(get_db)
):
    try:
        updated = await faq_crud.reorder_faqs(db, reorder_data.items)
        logger.info(f"Reordered {updated} FAQ(s).")
        return {"success": True, "updated": updated}
    except ValidationFailedError as e:
        await db.rollback()
        raise validation_http(e)
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error reordering FAQs with payload {reorder_data.model_dump_json()}: {str(e_general)}",
            exc_info=True
        )
        raise internal_error_http("An unexpected error occurred while reordering FAQs.", e_general)

@router.get(
    "/{faq_id}",
    response_model=FaqResponseSchema,
    summary="Get a specific FAQ by ID"
)
async def get_faq_by_id(
    faq_id: IdPath,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await faq_crud.get_faq_by_id(db, faq_id)
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e:
        logger.error(f"Error fetching FAQ with id {faq_id}: {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while fetching FAQ {faq_id}.", e)

@router.api_route(
    "/{faq_id}",
    methods=["PUT", "PATCH"],
    response_model=FaqResponseSchema,
    summary="Update some or all fields of an FAQ"
)
async def update_faq(
    faq_id: IdPath,
    faq_update_data: FaqUpdateSchema,
    db: AsyncSession = Depends(get_db)
):
    update_payload_str = faq_update_data.model_dump_json(exclude_unset=True)
    try:
        db_faq = await faq_crud.update_faq(db, faq_id, faq_update_data)
        logger.info(f"FAQ ID {faq_id} updated with payload {update_payload_str}.")
        return db_faq
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error updating FAQ id {faq_id} with payload {update_payload_str}: {str(e_general)}",
            exc_info=True
        )
        raise internal_error_http(f"An unexpected error occurred while updating FAQ {faq_id}.", e_general)

@router.delete(
    "/{faq_id}",
    response_model=MessageResponseSchema,
    summary="Delete an FAQ permanently"
)
async def delete_faq(
    faq_id: IdPath,
    db: AsyncSession = Depends(get_db)
):
    try:
        await faq_crud.delete_faq(db, faq_id)
        logger.info(f"FAQ ID {faq_id} deleted.")
        return {"success": True, "message": f"FAQ {faq_id} deleted successfully."}
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e:
        await db.rollback()
        logger.error(f"Error deleting FAQ with id {faq_id}: {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while deleting FAQ {faq_id}.", e)

@router.patch(
    "/{faq_id}/toggle-status",
    response_model=FaqResponseSchema,
    summary="Flip the active flag of an FAQ"
)
async def toggle_faq_status(
    faq_id: IdPath,
    db: AsyncSession = Depends(get_db)
):
    try:
        db_faq = await faq_crud.toggle_faq_status(db, faq_id)
        logger.info(f"FAQ ID {faq_id} is now {'active' if db_faq.active else 'inactive'}.")
        return db_faq
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e:
        await db.rollback()
        logger.error(f"Error toggling status of FAQ with id {faq_id}: {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while toggling FAQ {faq_id}.", e)
