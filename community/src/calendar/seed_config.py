"""
Seed configuration for the community center calendar.

Loads and validates config/seed.yaml: the room directory and the one-off
annual events appended by the recurring event generator.
"""

from pathlib import Path
from typing import List

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from community.src.calendar.models import Room
from config.exceptions import SeedConfigError

logger = structlog.get_logger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[3] / "config" / "seed.yaml"


class AnnualEventTemplate(BaseModel):
    """
    One-off event repeated once per seeded year.

    Attributes:
        month_day: "MM-DD", combined with the seed year
    """

    title: str = Field(..., min_length=1)
    description: str
    month_day: str
    start_time: str
    end_time: str
    room_id: int
    category: str

    @field_validator("month_day")
    @classmethod
    def validate_month_day(cls, v: str) -> str:
        """Validate MM-DD shape; the full date is checked when seeded."""
        parts = v.split("-")
        if len(parts) != 2 or not all(p.isdigit() and len(p) == 2 for p in parts):
            raise ValueError(f"month_day must be MM-DD, got '{v}'")
        return v

    def date_for(self, year: int) -> str:
        return f"{year:04d}-{self.month_day}"


class SeedConfig(BaseModel):
    """
    Validated seed file.

    Attributes:
        rooms: Room directory (unique ids)
        annual_events: One-off events, emitted after the recurring ones
    """

    rooms: List[Room] = Field(default_factory=list)
    annual_events: List[AnnualEventTemplate] = Field(default_factory=list)

    @field_validator("rooms")
    @classmethod
    def validate_unique_room_ids(cls, v: List[Room]) -> List[Room]:
        ids = [room.id for room in v]
        if len(ids) != len(set(ids)):
            raise ValueError(f"room ids must be unique, got {ids}")
        return v


def load_seed_config(path: str | Path | None = None) -> SeedConfig:
    """
    Load config/seed.yaml (or a custom path, mainly for tests).

    Raises:
        SeedConfigError: if the file is missing, not YAML, or invalid
    """
    seed_path = Path(path) if path is not None else DEFAULT_SEED_PATH

    if not seed_path.exists():
        raise SeedConfigError(f"Seed config not found: {seed_path}")

    try:
        raw = yaml.safe_load(seed_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise SeedConfigError(f"Invalid YAML in {seed_path}: {exc}") from exc

    try:
        config = SeedConfig.model_validate(raw)
    except ValidationError as exc:
        raise SeedConfigError(f"Invalid seed config {seed_path}: {exc}") from exc

    logger.debug(
        "seed_config_loaded",
        path=str(seed_path),
        rooms=len(config.rooms),
        annual_events=len(config.annual_events),
    )
    return config
