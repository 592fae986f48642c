"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TEMPLATES_DIR = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    """Wiki settings loaded from environment variables."""

    wiki_dir: Path | None = None
    project_dir: Path | None = None
    page_ext: str = ".txt"
    export_ext: str = ".html"
    export_format: Literal["markdown", "textile"] = "markdown"
    templates_dir: Path = TEMPLATES_DIR
    index_page: str = "IndexPage"
    author: str | None = None
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PLAINWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @field_validator("page_ext", "export_ext")
    @classmethod
    def _dotted(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"


settings = Settings()
