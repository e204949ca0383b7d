"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./gallery.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    pool_timeout: Optional[float] = None
    connect_timeout: Optional[float] = 10.0
    create_tables_on_startup: bool = True


class GallerySettings(BaseModel):
    site_name: str = "N8N Workflow Gallery"
    default_page_size: int = Field(default=12, ge=1)
    # unset: any positive limit is honoured
    max_page_size: Optional[int] = Field(default=None, ge=1)
    # htmlContent is rendered verbatim only while ingestion stays trusted
    trust_html_content: bool = True


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Workflow Template Gallery"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    gallery: GallerySettings = GallerySettings()
    logging: LoggingSettings = LoggingSettings()

    template_dir: Path = PACKAGE_DIR / "web" / "templates"

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def default_page_size(self) -> int:
        return self.gallery.default_page_size

    @property
    def max_page_size(self) -> Optional[int]:
        return self.gallery.max_page_size


@lru_cache()
def get_settings() -> Settings:
    return Settings()
