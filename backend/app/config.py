"""Process configuration loaded from the environment and an optional .env file."""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from app.errors import ConfigurationError

REQUIRED_ENV = (
    "IMAGEKIT_PUBLIC_KEY",
    "IMAGEKIT_PRIVATE_KEY",
    "IMAGEKIT_URL_ENDPOINT",
)
DEFAULT_PORT = 3000


class Settings(BaseModel):
    public_key: str
    private_key: str
    url_endpoint: str
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def _parse_port(value: Optional[str]) -> int:
    try:
        port = int(value) if value else 0
    except ValueError:
        port = 0
    return port or DEFAULT_PORT


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build the settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ`` after
                 loading ``.env`` (existing variables are not overridden).

    Returns:
        The validated settings

    Raises:
        ConfigurationError: If any of the ImageKit credentials is missing
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    missing = [key for key in REQUIRED_ENV if not environ.get(key)]
    if missing:
        raise ConfigurationError(f"Missing env: {', '.join(missing)}")

    return Settings(
        public_key=environ["IMAGEKIT_PUBLIC_KEY"],
        private_key=environ["IMAGEKIT_PRIVATE_KEY"],
        url_endpoint=environ["IMAGEKIT_URL_ENDPOINT"],
        host=environ.get("HOST") or "0.0.0.0",
        port=_parse_port(environ.get("PORT")),
        log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
    )
