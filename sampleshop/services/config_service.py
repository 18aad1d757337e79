# sampleshop/services/config_service.py
import threading

from sampleshop.domain.schemas import SheetsConfig, SheetsConfigIn
from sampleshop.utils.logging import get_logger
from sampleshop.utils.settings import SHEETS_FETCH_URL, SHEETS_WEBHOOK_URL

logger = get_logger(__name__)


class ConfigService:
    """Spreadsheet endpoints, seeded from the environment and changeable at runtime."""

    def __init__(self, webhook_url: str = SHEETS_WEBHOOK_URL, fetch_url: str = SHEETS_FETCH_URL):
        self._lock = threading.Lock()
        self._config = SheetsConfig(webhook_url=webhook_url, fetch_url=fetch_url)

    def get_config(self) -> SheetsConfig:
        with self._lock:
            return self._config

    def save_config(self, payload: SheetsConfigIn) -> SheetsConfig:
        with self._lock:
            self._config = SheetsConfig(webhook_url=payload.webhook_url, fetch_url=payload.fetch_url)
            logger.info("Spreadsheet integration config saved")
            return self._config
