from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List

from ecoevents.crud.event_crud import get_event_by_id
from ecoevents.exceptions import NotFoundError, ValidationFailedError
from ecoevents.models.comment import Comment
from ecoevents.models.event import Event
from ecoevents.schemas.comment import CommentCreateSchema

async def get_comment_by_id(db: AsyncSession, comment_id: int) -> Comment:
    comment = await db.get(Comment, comment_id)
    if comment is None:
        raise NotFoundError("Comment", comment_id)
    return comment

async def get_event_comments(
    db: AsyncSession,
    event_id: int,
    include_inactive: bool = False
) -> List[Comment]:
    """Comments for one event, newest first.

    Public pages only ever see active comments; moderation views pass
    ``include_inactive=True`` to get the soft-deleted ones as well.
    """
    await get_event_by_id(db, event_id)
    query = select(Comment).where(Comment.event_id == event_id)
    if not include_inactive:
        query = query.where(Comment.active.is_(True))
    result = await db.execute(query.order_by(Comment.created_at.desc(), Comment.id.desc()))
    return result.scalars().all()

async def create_comment(db: AsyncSession, comment_in: CommentCreateSchema, default_author: str) -> Comment:
    event = await db.get(Event, comment_in.event_id)
    if event is None:
        raise ValidationFailedError.single(
            ["body", "event_id"],
            f"Event with id {comment_in.event_id} does not exist."
        )
    author = (comment_in.author or "").strip() or default_author
    db_comment = Comment(
        event_id=comment_in.event_id,
        content=comment_in.content,
        author=author,
        edited=False,
        active=True
    )
    db.add(db_comment)
    await db.commit()
    await db.refresh(db_comment)
    return db_comment

async def update_comment_content(db: AsyncSession, comment_id: int, content: str) -> Comment:
    db_comment = await get_comment_by_id(db, comment_id)
    db_comment.content = content
    # set even when the text is unchanged; never cleared afterwards
    db_comment.edited = True
    await db.commit()
    await db.refresh(db_comment)
    return db_comment

async def set_comment_active(db: AsyncSession, comment_id: int, active: bool) -> Comment:
    db_comment = await get_comment_by_id(db, comment_id)
    db_comment.active = active
    await db.commit()
    await db.refresh(db_comment)
    return db_comment

async def deactivate_comment(db: AsyncSession, comment_id: int) -> Comment:
    return await set_comment_active(db, comment_id, False)

async def reactivate_comment(db: AsyncSession, comment_id: int) -> Comment:
    return await set_comment_active(db, comment_id, True)
