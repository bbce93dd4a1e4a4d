"""WebApp configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class WebAppConfig:
    """Configuration for the web application."""

    title: str = "Moto Transport API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    docs_url: str = "/api/docs"
    # None allows any origin
    cors_origins: Optional[list[str]] = None
