from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ecoevents.config import settings

engine = create_async_engine(settings.DATABASE_URL)

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    """Yield one session per request; closed when the request finishes."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_models(bind=engine):
    from ecoevents.models import Base

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
