"""Environment-driven settings and logging setup."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# ----------------------------
# Config
# ----------------------------
DEFAULT_REGION = "us-east-1"
DEFAULT_SERVICE = "timestream-influxdb"
DEFAULT_LOG_LEVEL = "INFO"

# Guard for continuation-token loops on a single resource's tags
MAX_TAG_PAGES = 50

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'


@dataclass(frozen=True)
class Settings:
    region: str = DEFAULT_REGION
    service: str = DEFAULT_SERVICE
    log_level: str = DEFAULT_LOG_LEVEL
    max_pages: int = MAX_TAG_PAGES


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ
    max_pages = env.get("TAGSYNC_MAX_PAGES")
    try:
        max_pages = int(max_pages) if max_pages else MAX_TAG_PAGES
    except ValueError:
        raise ValueError(f"TAGSYNC_MAX_PAGES must be an integer, got {max_pages!r}")
    if max_pages < 1:
        raise ValueError("TAGSYNC_MAX_PAGES must be at least 1")
    return Settings(
        region=env.get("AWS_REGION", DEFAULT_REGION),
        service=env.get("TAGSYNC_SERVICE", DEFAULT_SERVICE),
        log_level=env.get("TAGSYNC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        max_pages=max_pages,
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    """basicConfig for scripts embedding the adapter. The library never calls this itself."""
    settings = settings or load_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO),
                        format=LOG_FORMAT)
