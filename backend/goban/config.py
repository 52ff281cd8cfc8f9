import os
from typing import List, Mapping, Optional
from pydantic import BaseModel, Field

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]  # React frontend URL


class Settings(BaseModel):
    board_size: int = Field(default=19, ge=1)
    # Seconds per rendering frame; wheel input is admitted at most once per frame
    frame_interval: float = Field(default=1 / 60, gt=0)
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from GOBAN_* environment variables"""
    env = os.environ if environ is None else environ
    values = {}

    if "GOBAN_BOARD_SIZE" in env:
        values["board_size"] = env["GOBAN_BOARD_SIZE"]
    if "GOBAN_FRAME_INTERVAL" in env:
        values["frame_interval"] = env["GOBAN_FRAME_INTERVAL"]
    if "GOBAN_CORS_ORIGINS" in env:
        values["cors_origins"] = [
            origin.strip() for origin in env["GOBAN_CORS_ORIGINS"].split(",") if origin.strip()
        ]

    return Settings(**values)
