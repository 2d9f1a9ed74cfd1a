# path: campus-route/campus_route/config.py

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from campus_route.models.campus_models import CampusConfig


# Example in .env:
# CAMPUS_ROUTE_CONFIG=/srv/maps/north-campus.json
# CAMPUS_ROUTE_CACHE_MAX_ENTRIES=512
load_dotenv()

logger = logging.getLogger(__name__)

ENV_PREFIX = "CAMPUS_ROUTE_"
CONFIG_PATH_ENV = ENV_PREFIX + "CONFIG"
DEFAULT_CAMPUS_FILE = Path(__file__).resolve().parent / "data" / "campus.json"


class RouteSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    walking_speed_mps: float = Field(default=1.4, gt=0)
    road_snap_threshold_m: float = Field(default=10.0, ge=0)
    intersection_radius_m: float = Field(default=200.0, gt=0)
    cache_max_entries: int = Field(default=256, gt=0)
    cache_key_decimals: int = Field(default=6, ge=0, le=12)
    arrival_threshold_m: float = Field(default=10.0, ge=0)

    @classmethod
    def from_env(cls) -> "RouteSettings":
        """Build settings from CAMPUS_ROUTE_<FIELD> environment variables."""
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip() != "":
                values[name] = raw.strip()
        return cls(**values)


def resolve_campus_path(path: Optional[Union[str, Path]] = None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_CAMPUS_FILE


def load_campus_config(path: Optional[Union[str, Path]] = None) -> CampusConfig:
    campus_path = resolve_campus_path(path)
    if not campus_path.is_file():
        raise FileNotFoundError(f"Campus configuration not found: {campus_path}")

    campus = CampusConfig.model_validate_json(campus_path.read_text(encoding="utf-8"))
    logger.info(
        "Loaded campus %r from %s (%d road nodes)",
        campus.name,
        campus_path,
        len(campus.road_nodes),
    )
    return campus
