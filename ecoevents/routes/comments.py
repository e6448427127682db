from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from ecoevents.config import settings
from ecoevents.crud import comment_crud
from ecoevents.database import get_db
from ecoevents.exceptions import (
    NotFoundError,
    ValidationFailedError,
    internal_error_http,
    not_found_http,
    validation_http,
)
from ecoevents.query_params import IdPath
from ecoevents.schemas.comment import (
    CommentCreateSchema,
    CommentUpdateSchema,
    CommentResponseSchema
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/comments",
    tags=["Comments"]
)

async def _create_comment(db: AsyncSession, comment_data: CommentCreateSchema, default_author: str):
    try:
        db_comment = await comment_crud.create_comment(db, comment_data, default_author)
        logger.info(f"Comment ID {db_comment.id} created by '{db_comment.author}' for event ID {db_comment.event_id}")
        return db_comment
    except ValidationFailedError as e:
        logger.warning(f"Rejected comment for event ID {comment_data.event_id}: {str(e)}")
        raise validation_http(e)
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error creating comment for event ID {comment_data.event_id}: {str(e_general)}",
            exc_info=True
        )
        raise internal_error_http("An unexpected error occurred while publishing the comment.", e_general)

@router.post(
    "",
    response_model=CommentResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a comment on an event"
)
async def create_comment(
    comment_data: CommentCreateSchema,
    db: AsyncSession = Depends(get_db)
):
    return await _create_comment(db, comment_data, settings.DEFAULT_COMMENT_AUTHOR)

@router.post(
    "/as_admin",
    response_model=CommentResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a comment from the moderation panel"
)
async def create_comment_as_admin(
    comment_data: CommentCreateSchema,
    db: AsyncSession = Depends(get_db)
):
    return await _create_comment(db, comment_data, settings.ADMIN_COMMENT_AUTHOR)

@router.get(
    "/{comment_id}",
    response_model=CommentResponseSchema,
    summary="Get a specific comment by ID, active or not"
)
async def get_comment_by_id(
    comment_id: IdPath,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await comment_crud.get_comment_by_id(db, comment_id)
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e:
        logger.error(f"Error fetching comment with id {comment_id}: {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while fetching comment {comment_id}.", e)

@router.patch(
    "/{comment_id}",
    response_model=CommentResponseSchema,
    summary="Edit the content of a comment"
)
async def update_comment(
    comment_id: IdPath,
    comment_update_data: CommentUpdateSchema,
    db: AsyncSession = Depends(get_db)
):
    try:
        db_comment = await comment_crud.update_comment_content(db, comment_id, comment_update_data.content)
        logger.info(f"Comment ID {comment_id} edited.")
        return db_comment
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error updating comment id {comment_id}: {str(e_general)}",
            exc_info=True
        )
        raise internal_error_http(f"An unexpected error occurred while updating comment {comment_id}.", e_general)

@router.delete(
    "/{comment_id}",
    response_model=CommentResponseSchema,
    summary="Hide a comment (soft delete)"
)
async def deactivate_comment(
    comment_id: IdPath,
    db: AsyncSession = Depends(get_db)
):
    try:
        db_comment = await comment_crud.deactivate_comment(db, comment_id)
        logger.info(f"Comment ID {comment_id} deactivated (event ID {db_comment.event_id}).")
        return db_comment
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e:
        await db.rollback()
        logger.error(f"Error deactivating comment with id {comment_id}: {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while deactivating comment {comment_id}.", e)

@router.patch(
    "/{comment_id}/restore",
    response_model=CommentResponseSchema,
    summary="Make a hidden comment visible again"
)
async def reactivate_comment(
    comment_id: IdPath,
    db: AsyncSession = Depends(get_db)
):
    try:
        db_comment = await comment_crud.reactivate_comment(db, comment_id)
        logger.info(f"Comment ID {comment_id} reactivated (event ID {db_comment.event_id}).")
        return db_comment
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e:
        await db.rollback()
        logger.error(f"Error reactivating comment with id {comment_id}: {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while reactivating comment {comment_id}.", e)
