"""Configuration schema for WorldClock using nested Pydantic models."""

from typing import Annotated, ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..cities.models import City
from ..utils.time import is_valid_timezone


_CLOCK_PATTERN = r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$"


def _validate_timezone_id(v: str) -> str:
    if not is_valid_timezone(v):
        raise ValueError(f"Unknown IANA timezone identifier: {v}")
    return v


class DisplayConfig(BaseModel):
    """Presentation configuration."""

    hour12: bool = Field(
        default=True,
        description="Render times on a 12-hour clock with AM/PM",
    )
    granularity: Literal["time", "date", "datetime"] = Field(
        default="datetime",
        description="Default rendering for converted instants",
    )
    timestamp_format: Literal["t", "T", "d", "D", "f", "F", "R"] = Field(
        default="F",
        description="Discord timestamp format (t=short time, T=long time, d=short date, D=long date, f=short date/time, F=long date/time, R=relative time)",
    )


class WorkingHoursConfig(BaseModel):
    """Local working hours applied to every city."""

    start: str = Field(
        default="09:00",
        description="Start of the working day in HH:MM format",
        pattern=_CLOCK_PATTERN,
    )
    end: str = Field(
        default="17:00",
        description="End of the working day in HH:MM format",
        pattern=_CLOCK_PATTERN,
    )

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        """Ensure the working day ends after it starts."""
        start_h, start_m = map(int, self.start.split(":"))
        end_h, end_m = map(int, self.end.split(":"))
        if (end_h, end_m) <= (start_h, start_m):
            raise ValueError("Working hours end must be after start")
        return self


class MeetingsConfig(BaseModel):
    """Meeting suggestion configuration."""

    duration_minutes: Annotated[int, Field(ge=15, le=480)] = Field(
        default=60,
        description="Default meeting length in minutes",
    )
    step_minutes: Annotated[int, Field(ge=5, le=120)] = Field(
        default=30,
        description="Spacing between candidate meeting start times",
    )
    max_suggestions: Annotated[int, Field(ge=1, le=48)] = Field(
        default=10,
        description="Maximum number of suggested meeting slots",
    )


class CityConfig(BaseModel):
    """A catalog city entry."""

    name: str = Field(..., min_length=1, description="Display name of the city")
    country: str = Field(default="", description="Country name or flag label")
    timezone: str = Field(..., description="IANA timezone identifier")
    offset: int = Field(
        default=0,
        ge=-720,
        le=840,
        description="Nominal standard UTC offset in minutes (informational)",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(str_strip_whitespace=True)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate the timezone against the host zone database."""
        return _validate_timezone_id(v)

    def to_city(self) -> City:
        """Convert to the immutable City record."""
        return City(
            name=self.name,
            country=self.country,
            timezone_id=self.timezone,
            base_offset_minutes=self.offset,
        )


class SystemConfig(BaseModel):
    """System configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level for the application log file",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class WorldClockConfig(BaseModel):
    """
    Configuration model for WorldClock with nested structure.

    This model defines all configuration options with validation,
    type hints, and default values. Every section is optional.
    """

    home_timezone: str = Field(
        default="UTC",
        description="IANA timezone used when no source zone is given",
    )
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    working_hours: WorkingHoursConfig = Field(default_factory=WorkingHoursConfig)
    meetings: MeetingsConfig = Field(default_factory=MeetingsConfig)
    cities: list[CityConfig] = Field(
        default_factory=list,
        description="City catalog; empty means the built-in world cities",
    )
    system: SystemConfig = Field(default_factory=SystemConfig)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
        frozen=False,
    )

    @field_validator("home_timezone")
    @classmethod
    def validate_home_timezone(cls, v: str) -> str:
        """Validate the home timezone against the host zone database."""
        return _validate_timezone_id(v)

    @field_validator("cities")
    @classmethod
    def validate_unique_city_names(cls, v: list[CityConfig]) -> list[CityConfig]:
        """Reject duplicate city names, ignoring case."""
        seen: set[str] = set()
        for city in v:
            key = city.name.casefold()
            if key in seen:
                raise ValueError(f"Duplicate city name: {city.name}")
            seen.add(key)
        return v
