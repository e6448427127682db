from sqlalchemy.orm import declarative_base

Base = declarative_base()

from ecoevents.models.event import Event, EventStatus  # noqa: E402,F401
from ecoevents.models.comment import Comment  # noqa: E402,F401
from ecoevents.models.faq import Faq  # noqa: E402,F401
