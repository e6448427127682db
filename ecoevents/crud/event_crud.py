from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional

from ecoevents.exceptions import NotFoundError
from ecoevents.models.event import Event, EventStatus
from ecoevents.schemas.event import EventCreateSchema, EventUpdateSchema

async def get_event_by_id(db: AsyncSession, event_id: int) -> Event:
    event = await db.get(Event, event_id)
    if event is None:
        raise NotFoundError("Event", event_id)
    return event

async def get_events_paginated(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 100,
    status: Optional[EventStatus] = None
) -> List[Event]:
    query = select(Event)
    if status is not None:
        query = query.where(Event.status == status)
    result = await db.execute(
        query.order_by(Event.date.asc(), Event.id.asc()).offset(skip).limit(limit)
    )
    return result.scalars().all()

async def create_event(db: AsyncSession, event_in: EventCreateSchema) -> Event:
    db_event = Event(**event_in.model_dump())
    db.add(db_event)
    await db.commit()
    await db.refresh(db_event)
    return db_event

async def update_event(db: AsyncSession, event_id: int, event_in: EventUpdateSchema) -> Event:
    db_event = await get_event_by_id(db, event_id)
    update_data = event_in.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_event, key, value)
    await db.commit()
    await db.refresh(db_event)
    return db_event
