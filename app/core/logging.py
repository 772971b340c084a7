# app/core/logging.py
import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)

# Bibliotecas muito verbosas
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger("app")
