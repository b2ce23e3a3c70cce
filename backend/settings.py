"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.database_path)
"""

from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.calendar import AppCalendar, ChartPeriod, weekday_index
from domain.units import WeightUnit, is_japanese_locale


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )
    log_level: str = Field(
        default="info",
        description="Log level for the app and uvicorn",
    )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------
    database_path: str = Field(
        default="data/trainlog.sqlite3",
        description="SQLite file holding the workout history (':memory:' for tests)",
    )
    catalog_path: Optional[str] = Field(
        default=None,
        description="Exercise catalog YAML (defaults to the bundled catalog)",
    )

    # -------------------------------------------------------------------------
    # Calendar
    # -------------------------------------------------------------------------
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone that defines calendar days",
    )
    week_starts_on: str = Field(
        default="monday",
        description="First day of the week for weekly buckets",
    )

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------
    default_weight_unit: WeightUnit = Field(
        default=WeightUnit.KG,
        description="Weight unit used when a request does not pass one",
    )
    default_locale: str = Field(
        default="en",
        description="Locale for number formatting and display names",
    )

    # -------------------------------------------------------------------------
    # Charts
    # -------------------------------------------------------------------------
    chart_day_buckets: int = Field(default=7, ge=1, description="Days in the daily chart")
    chart_week_buckets: int = Field(default=8, ge=1, description="Weeks in the weekly chart")
    chart_month_buckets: int = Field(default=6, ge=1, description="Months in the monthly chart")

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"critical", "error", "warning", "info", "debug"}
        if v.lower() not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {valid_levels}")
        return v.lower()

    @field_validator("app_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensure the timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v

    @field_validator("week_starts_on")
    @classmethod
    def validate_week_start(cls, v: str) -> str:
        weekday_index(v)
        return v.strip().lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    @property
    def is_japanese(self) -> bool:
        """Whether the default locale shows Japanese exercise names."""
        return is_japanese_locale(self.default_locale)

    def app_calendar(self) -> AppCalendar:
        """Build the calendar every date key is normalized with."""
        return AppCalendar(
            timezone=self.app_timezone,
            first_weekday=weekday_index(self.week_starts_on),
        )

    def chart_buckets(self, period: ChartPeriod) -> int:
        """Number of buckets shown for a chart period."""
        return {
            ChartPeriod.DAY: self.chart_day_buckets,
            ChartPeriod.WEEK: self.chart_week_buckets,
            ChartPeriod.MONTH: self.chart_month_buckets,
        }[period]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
