from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from ecoevents.crud import comment_crud, event_crud
from ecoevents.config import settings
from ecoevents.database import get_db
from ecoevents.exceptions import NotFoundError, internal_error_http, not_found_http
from ecoevents.models.event import EventStatus
from ecoevents.query_params import IdPath
from ecoevents.schemas.comment import CommentResponseSchema
from ecoevents.schemas.event import (
    EventCreateSchema,
    EventUpdateSchema,
    EventResponseSchema
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/events",
    tags=["Events"]
)

@router.post(
    "",
    response_model=EventResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new event"
)
async def create_event(
    event_data: EventCreateSchema,
    db: AsyncSession = Depends(get_db)
):
    try:
        db_event = await event_crud.create_event(db, event_data)
        logger.info(f"Event '{db_event.name}' created with ID {db_event.id}")
        return db_event
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error creating event with name '{event_data.name}': {str(e_general)}",
            exc_info=True
        )
        raise internal_error_http("An unexpected error occurred while creating the event.", e_general)

@router.get(
    "",
    response_model=List[EventResponseSchema],
    summary="Get all events with optional status filter and pagination"
)
async def get_all_events(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(default=0, ge=0, le=settings.MAX_DB_INTEGER),
    limit: int = Query(default=100, ge=0, le=settings.MAX_DB_INTEGER),
    event_status: Optional[EventStatus] = Query(default=None, alias="status")
):
    try:
        return await event_crud.get_events_paginated(db, skip=skip, limit=limit, status=event_status)
    except Exception as e:
        logger.error(f"Error fetching events: {str(e)}", exc_info=True)
        raise internal_error_http("An error occurred while fetching events.", e)

@router.get(
    "/{event_id}",
    response_model=EventResponseSchema,
    summary="Get a specific event by ID"
)
async def get_event_by_id(
    event_id: IdPath,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await event_crud.get_event_by_id(db, event_id)
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e:
        logger.error(f"Error fetching event with id {event_id}: {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while fetching event {event_id}.", e)

@router.patch(
    "/{event_id}",
    response_model=EventResponseSchema,
    summary="Update some fields of an event"
)
async def update_event(
    event_id: IdPath,
    event_update_data: EventUpdateSchema,
    db: AsyncSession = Depends(get_db)
):
    update_payload_str = event_update_data.model_dump_json(exclude_unset=True)
    try:
        db_event = await event_crud.update_event(db, event_id, event_update_data)
        logger.info(f"Event ID {event_id} (name: '{db_event.name}') updated.")
        return db_event
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e_general:
        await db.rollback()
        logger.error(
            f"Unexpected error updating event id {event_id} with payload {update_payload_str}: {str(e_general)}",
            exc_info=True
        )
        raise internal_error_http(f"An unexpected error occurred while updating event {event_id}.", e_general)

@router.get(
    "/{event_id}/comments",
    response_model=List[CommentResponseSchema],
    summary="Get the comments of an event, newest first"
)
async def get_event_comments(
    event_id: IdPath,
    include_inactive: bool = False,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await comment_crud.get_event_comments(db, event_id, include_inactive=include_inactive)
    except NotFoundError as e:
        raise not_found_http(e)
    except Exception as e:
        logger.error(f"Error fetching comments for event_id {event_id}: {str(e)}", exc_info=True)
        raise internal_error_http(f"An error occurred while fetching comments for event {event_id}.", e)
