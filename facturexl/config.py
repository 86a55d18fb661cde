"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BillingSettings(BaseSettings):
    """Currency and document reference settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    currency_label: str = Field(default="CFP", description="Suffix appended to formatted amounts")
    default_ref_prefix: str = Field(default="INV", description="Prefix for generated document references")


class RenewalSettings(BaseSettings):
    """Subscription renewal alerting windows."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    alert_days_ahead: int = Field(
        default=7,
        ge=0,
        description="Days ahead of an end or renewal date that trigger an alert",
    )
    overdue_grace_days: int = Field(
        default=30,
        ge=0,
        description="Days a missed renewal keeps alerting after its date",
    )
    default_yearly_anchor_month: int = Field(
        default=12,
        ge=1,
        le=12,
        description="Renewal month for yearly subscriptions without an explicit anchor",
    )


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.billing.currency_label
        settings.renewal.alert_days_ahead
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    billing: BillingSettings = Field(default_factory=BillingSettings)
    renewal: RenewalSettings = Field(default_factory=RenewalSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton: import this wherever settings are needed.
settings = Settings()
