"""Application configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from miniwiki.core.auth import hash_password


class Settings(BaseSettings):
    """Application settings loaded from environment variables or flags."""

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    name: str = "wiki"
    password: str = ""
    data_dir: Path = Path("./pages")
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="MINIWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class WikiConfig(BaseModel):
    """Process-wide wiki configuration, immutable after startup."""

    model_config = ConfigDict(frozen=True)

    name: str
    pass_hash: str
    editable: bool
    data_dir: Path

    @classmethod
    def from_settings(cls, settings: Settings) -> "WikiConfig":
        """Build the config, hashing the password even when it is empty."""
        return cls(
            name=settings.name,
            pass_hash=hash_password(settings.password),
            editable=settings.password != "",
            data_dir=settings.data_dir,
        )
