import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # chip8-web/


class Settings(BaseSettings):
    """Server settings with validation.

    Every field has a default matching the fixed values of the front-end
    (port 8080 on all interfaces, ``templates/index.html``, ``assets/``), so
    the server starts with no configuration at all. Values can be overridden
    with ``CHIP8_``-prefixed environment variables or the ``.env`` file.
    """

    # Listener
    host: str = Field(default="0.0.0.0", min_length=1, description="Interface to bind")  # nosec B104
    port: int = Field(default=8080, ge=1, le=65535, description="TCP port to listen on")

    # Page
    templates_dir: Path = Field(default=BASE_DIR / "templates", description="Directory holding the index template")
    template_name: str = Field(default="index.html", min_length=1, description="Index template file name")
    page_title: str = Field(default="Chip-8", description="Title passed to the index template")

    # Static assets
    assets_dir: Path = Field(default=BASE_DIR / "assets", description="Directory served under /static")

    # Logging
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    log_file: Path | None = Field(default=None, description="Optional JSON log file (rotated)")

    model_config = SettingsConfigDict(
        env_prefix="CHIP8_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("host", "template_name", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only values."""
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the level name and make sure logging knows it."""
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @property
    def template_path(self) -> Path:
        return self.templates_dir / self.template_name


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    The ``.env`` file and environment are read once per process.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
