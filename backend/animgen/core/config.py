from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Use top level .env file (one level above ./backend/)
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "animgen"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    # Animation compiler
    ANIMATION_SOURCE_FILENAME: str = "dynamic-animation.py"
    # Comma-separated dialect transforms applied before the RestrictedPython policy
    ANIMATION_SYNTAX_PRESETS: str = "typing,literals"
    # Logger behind the `log` capability exposed to generated code
    ANIMATION_LOG_NAME: str = "animgen.animation"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def syntax_presets(self) -> tuple[str, ...]:
        raw = (self.ANIMATION_SYNTAX_PRESETS or "").strip()
        return tuple(p.strip() for p in raw.split(",") if p.strip())

    # Default composition used for previews (use_video_config)
    VIDEO_WIDTH: int = 1920
    VIDEO_HEIGHT: int = 1080
    VIDEO_FPS: int = 30
    VIDEO_DURATION_IN_FRAMES: int = 150


settings = Settings()  # type: ignore
