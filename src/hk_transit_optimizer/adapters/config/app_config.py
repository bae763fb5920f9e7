"""12-factor configuration adapter using environment variables and TOML config."""

import logging
from pathlib import Path
import tomllib
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hk_transit_optimizer.domain.models.policy import LegSelectionPolicy, RailGraphSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.example.toml"

# [policy] keys in the TOML file that override the matching fields below
POLICY_KEYS = (
    "walking_speed_mps",
    "short_walk_meters",
    "rail_wait_seconds",
    "rail_penalty_seconds",
    "pair_penalty_seconds",
    "transfer_seconds",
    "walkway_seconds",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")

    # External services
    nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org", description="Nominatim geocoder base URL"
    )
    otp_base_url: str = Field(
        default="http://localhost:8080", description="OpenTripPlanner base URL"
    )
    otp_timeout_seconds: float = Field(
        default=20.0, description="Timeout for a single trip planner request in seconds"
    )
    user_agent: str = Field(
        default="hk-transit-optimizer/0.1 (contact: local)",
        description="User-Agent sent to external services (Nominatim requires one)",
    )
    geocode_pause_ms: int = Field(
        default=350, description="Pause in milliseconds after every geocoding request"
    )
    planner_pause_ms: int = Field(
        default=120, description="Pause in milliseconds after every trip planner request"
    )
    timezone: str = Field(
        default="Asia/Hong_Kong",
        description="Timezone used for the departure date and time sent to the planner",
    )

    # Rail feed
    mtr_gtfs_url: str | None = Field(
        default=None, description="URL of the GTFS zip with the MTR rail service"
    )
    mtr_gtfs_path: str | None = Field(
        default=None, description="Local path of the GTFS zip (takes precedence over the URL)"
    )
    feed_timeout_seconds: float = Field(
        default=120.0, description="Timeout for downloading the GTFS zip in seconds"
    )
    rail_stop_prefix: str = Field(default="MTR-", description="Stop id prefix of rail platforms")
    rail_route_type: str = Field(default="1", description="GTFS route_type of rail routes")
    transfer_seconds: int = Field(
        default=180, description="Cost of changing platforms within one station"
    )
    walkway_codes: tuple[str, str] | None = Field(
        default=("TST", "ETS"),
        description="Two station codes linked by a pedestrian walkway",
    )
    walkway_seconds: int = Field(default=300, description="Cost of the walkway between stations")
    rail_graph_single_flight: bool = Field(
        default=True,
        description="Let concurrent first requests wait for one graph load instead of loading twice",
    )
    rail_graph_retry_seconds: float = Field(
        default=300.0, description="Seconds to wait before retrying a failed feed load"
    )

    # Leg selection policy
    walking_speed_mps: float = Field(default=1.2, description="Walking speed in m/s")
    short_walk_meters: float = Field(
        default=1200.0, description="Below this distance walking is the initial best plan"
    )
    rail_wait_seconds: int = Field(default=180, description="Expected wait for a train")
    rail_penalty_seconds: int = Field(
        default=240, description="Flat penalty added to every rail plan"
    )
    pair_penalty_seconds: int = Field(
        default=300, description="Extra rail penalty for penalized station pairs"
    )
    penalized_pairs: list[tuple[str, str]] = Field(
        default=[("TST", "ETS")],
        description="Station code pairs that are artificially cheap in the rail graph",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=30,
        description="Maximum number of optimize requests allowed per IP address per minute",
    )

    # TOML config file with aliases and policy overrides
    config_file: str | None = Field(
        default=DEFAULT_CONFIG_FILE,
        description="Path to TOML configuration file for place aliases and policy",
    )

    @field_validator("walking_speed_mps", "otp_timeout_seconds", "feed_timeout_seconds")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate speeds and timeouts are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator(
        "rail_wait_seconds",
        "rail_penalty_seconds",
        "pair_penalty_seconds",
        "transfer_seconds",
        "walkway_seconds",
        "geocode_pause_ms",
        "planner_pause_ms",
    )
    @classmethod
    def validate_not_negative(cls, v: int) -> int:
        """Validate penalties, costs and pauses are not negative."""
        if v < 0:
            raise ValueError("value must not be negative")
        return v

    def load_toml_data(self) -> dict[str, Any]:
        """Load the TOML file and apply its [policy] overrides.

        A missing default file yields an empty configuration; a missing file
        that was set explicitly is an error.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            if self.config_file == DEFAULT_CONFIG_FILE:
                logger.warning(f"{DEFAULT_CONFIG_FILE} not found, running without aliases")
                return {}
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        policy = toml_data.get("policy", {})
        if not isinstance(policy, dict):
            raise ValueError("TOML config 'policy' must be a table")
        for key in POLICY_KEYS:
            if key in policy:
                setattr(self, key, policy[key])

        pairs = toml_data.get("penalized_pairs")
        if pairs is not None:
            if not isinstance(pairs, list):
                raise ValueError("TOML config 'penalized_pairs' must be a list")
            parsed: list[tuple[str, str]] = []
            for pair in pairs:
                codes = pair.get("codes", []) if isinstance(pair, dict) else []
                if len(codes) != 2:
                    raise ValueError("Each penalized pair needs exactly two station codes")
                parsed.append((str(codes[0]), str(codes[1])))
            self.penalized_pairs = parsed

        return toml_data

    def leg_selection_policy(self) -> LegSelectionPolicy:
        """Policy numbers for the hybrid leg selector."""
        return LegSelectionPolicy(
            walking_speed_mps=self.walking_speed_mps,
            short_walk_meters=self.short_walk_meters,
            rail_wait_seconds=self.rail_wait_seconds,
            rail_penalty_seconds=self.rail_penalty_seconds,
            pair_penalty_seconds=self.pair_penalty_seconds,
            penalized_pairs=frozenset(frozenset(pair) for pair in self.penalized_pairs),
        )

    def rail_graph_settings(self) -> RailGraphSettings:
        """Settings for turning the feed into a rail graph."""
        return RailGraphSettings(
            stop_prefix=self.rail_stop_prefix,
            rail_route_type=self.rail_route_type,
            transfer_seconds=self.transfer_seconds,
            walkway_codes=self.walkway_codes,
            walkway_seconds=self.walkway_seconds,
        )
