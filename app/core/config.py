from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, Field
from typing import List, Union

from cuber import __version__
from cuber.cube import SHUFFLE_METHODS


class Settings(BaseSettings):
    """Application settings for the cube service"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from environment
    )

    # Application
    app_name: str = Field(default="Cuber", alias="APP_NAME")
    app_version: str = Field(default=__version__, alias="APP_VERSION")
    debug: bool = Field(default=True, alias="DEBUG")  # Default to development mode
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    port: int = Field(default=8000, alias="PORT")

    # Cube driver
    twist_duration: float = Field(default=1.0, alias="TWIST_DURATION")  # seconds per quarter turn
    min_twist_duration: float = Field(default=0.25, alias="MIN_TWIST_DURATION")
    tick_interval: float = Field(default=0.016, alias="TICK_INTERVAL")
    shuffle_method: str = Field(default="PRESERVE_LOGO", alias="SHUFFLE_METHOD")
    max_settle_ticks: int = Field(default=10000, alias="MAX_SETTLE_TICKS")

    @field_validator("shuffle_method", mode="before")
    @classmethod
    def check_shuffle_method(cls, v):
        v = str(v).upper()
        if v not in SHUFFLE_METHODS:
            raise ValueError(f"shuffle_method must be one of {', '.join(SHUFFLE_METHODS)}")
        return v

    @property
    def shuffle_alphabet(self) -> str:
        return SHUFFLE_METHODS[self.shuffle_method]

    # CORS
    allowed_origins: Union[str, List[str]] = Field(default="", alias="ALLOWED_ORIGINS")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        return []


# Create settings instance
settings = Settings()
