"""
treasure_hunt.config — Configuration models
===========================================

Validated configuration for the engine and for simulation runs.

Configuration is assembled from (later sources win):
    1. Model defaults
    2. A JSON config file
    3. A .env file and TREASURE_HUNT_* environment variables

Wei amounts accept plain integers or ether strings such as
"0.01 ether".
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .units import parse_ether

logger = logging.getLogger("treasure_hunt.config")

MINIMUM_BET_WEI = 10 ** 16  # 0.01 ether
DEFAULT_WINNER_SHARE_PERCENT = 90


def _coerce_wei(value: Any) -> Any:
    """Turn '0.01 ether' into wei; leave everything else to pydantic."""
    if isinstance(value, str) and value.strip().lower().endswith("ether"):
        return parse_ether(value)
    return value


class EngineConfig(BaseModel):
    """
    Rules the engine is deployed with.

    Attributes:
        minimum_bet: Smallest accepted join value in wei
        winner_share_percent: Share of the pot paid to the winner;
            the remainder accrues to the owner as fees
    """

    model_config = ConfigDict(frozen=True)

    minimum_bet: int = Field(default=MINIMUM_BET_WEI, ge=0)
    winner_share_percent: int = Field(default=DEFAULT_WINNER_SHARE_PERCENT, ge=0, le=100)

    @field_validator("minimum_bet", mode="before")
    @classmethod
    def _parse_minimum_bet(cls, value: Any) -> Any:
        return _coerce_wei(value)


class SimulationConfig(BaseModel):
    """Settings for a local simulation run (see treasure_hunt.runner)."""

    owner: str = "0xOwner"
    players: int = Field(default=3, ge=1, le=50)
    bet: int = Field(default=MINIMUM_BET_WEI, ge=0)
    rounds: int = Field(default=1, ge=1)
    max_turns: int = Field(default=1000, ge=1)
    seed: Optional[int] = None
    starting_balance: int = Field(default=10 ** 18, ge=0)
    wander: float = Field(default=0.2, ge=0.0, le=1.0)
    log_file: str = "treasure_hunt.log"
    log_level: str = "INFO"
    show_events: bool = True
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @field_validator("bet", "starting_balance", mode="before")
    @classmethod
    def _parse_amounts(cls, value: Any) -> Any:
        return _coerce_wei(value)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


# Environment variable → config key; engine keys are nested
ENV_MAPPINGS = {
    "TREASURE_HUNT_OWNER": "owner",
    "TREASURE_HUNT_PLAYERS": "players",
    "TREASURE_HUNT_BET": "bet",
    "TREASURE_HUNT_ROUNDS": "rounds",
    "TREASURE_HUNT_MAX_TURNS": "max_turns",
    "TREASURE_HUNT_SEED": "seed",
    "TREASURE_HUNT_STARTING_BALANCE": "starting_balance",
    "TREASURE_HUNT_LOG_FILE": "log_file",
    "TREASURE_HUNT_LOG_LEVEL": "log_level",
}

ENGINE_ENV_MAPPINGS = {
    "TREASURE_HUNT_MIN_BET": "minimum_bet",
    "TREASURE_HUNT_WINNER_SHARE": "winner_share_percent",
}


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> SimulationConfig:
    """
    Load simulation config from file and environment.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional .env path; defaults to a .env in the working dir

    Returns:
        Validated SimulationConfig

    Raises:
        FileNotFoundError: config_path was given but does not exist
        pydantic.ValidationError: A value failed validation
    """
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))

    data: Dict[str, Any] = {}
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        logger.debug("Loaded config from %s", path)

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            data[config_key] = os.environ[env_key]

    engine_data = dict(data.get("engine") or {})
    for env_key, config_key in ENGINE_ENV_MAPPINGS.items():
        if env_key in os.environ:
            engine_data[config_key] = os.environ[env_key]
    if engine_data:
        data["engine"] = engine_data

    return SimulationConfig.model_validate(data)
