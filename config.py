"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks DECICALC_.
"""
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Arytmetyka (Decimal, ROUND_HALF_UP)
    precision: int = Field(default=80, ge=50)
    display_digits: int = Field(default=15, ge=1)

    # Etykiety błędów na ścieżce "="
    division_by_zero_label: str = "Error"
    malformed_label: str = "Malformed"

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "DeciCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="DECICALC_", env_file=".env", extra="ignore")

    @model_validator(mode="after")
    def _display_within_precision(self) -> "Settings":
        if self.display_digits > self.precision:
            raise ValueError("display_digits cannot exceed precision")
        return self
