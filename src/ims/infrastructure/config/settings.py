"""Application settings read from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    RECEIPT_DIR: Path = Path(os.getenv("IMS_RECEIPT_DIR", "."))
    FIRST_RECEIPT_ID: int = int(os.getenv("IMS_FIRST_RECEIPT_ID", "1001"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("IMS_LOG_LEVEL", "WARNING")  # DEBUG, INFO, WARNING, ERROR


settings = Settings()
