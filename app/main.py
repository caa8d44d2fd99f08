from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI

from app.core.config import settings
from app.routers import auth, bot, wg

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="WireGuard Status API")
app.include_router(wg.router, prefix="/api/wg")
app.include_router(bot.router, prefix="/api/bot")
app.include_router(auth.router, prefix="/api/auth")
