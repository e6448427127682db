from fastapi import FastAPI
import uvicorn
from ecoevents.routes import events, comments, faqs
from ecoevents.config import settings
from ecoevents.database import init_models
import logging
import sys

LOG_LEVEL = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"
stream_handler = logging.StreamHandler(sys.stdout)
stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
logging.basicConfig(level=LOG_LEVEL, handlers=[stream_handler], force=True)

logger = logging.getLogger(__name__)

app = FastAPI(title="EcoEvents API")

app.include_router(events.router)
app.include_router(comments.router)
app.include_router(faqs.router)


@app.get("/")
def root():
    return {"message": "EcoEvents API", "status": "running"}

@app.on_event("startup")
async def startup():
    await init_models()
    logger.info(f"Database schema ready ({settings.APP_ENV} environment).")

if __name__ == "__main__":
    uvicorn.run("ecoevents.main:app", reload=True)
