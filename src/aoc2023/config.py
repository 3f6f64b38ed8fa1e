"""Runtime configuration for the Advent of Code runner."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="AOC2023_", env_file=".env", extra="ignore")

    app_name: str = "aoc2023"
    log_level: str = "WARNING"
    assets_dir: Path | None = Field(
        default=None,
        description="Directory holding DayNN/Test.txt inputs; defaults to the bundled assets.",
    )
    max_walk_steps: int | None = Field(
        default=None,
        ge=1,
        description="Abort graph walks after this many steps. Unbounded when unset.",
    )


settings = Settings()
