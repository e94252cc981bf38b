"""Application settings."""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    photos_folder: Path = Path("images")
    relay_url: str = "http://127.0.0.1:5001/api/mail/send"
    relay_timeout_seconds: Optional[float] = None  # None waits indefinitely
    subject_type: str = "photo-report"
    report_dir: Optional[Path] = None  # None uses the system temp dir
    report_title: str = "Photo Search Report"
    cors_origins: list[str] = ["*"]

    model_config = {"env_prefix": "PHOTO_FINDER_"}


settings = Settings()
