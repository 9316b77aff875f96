from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from billsplit.utils.parse import DATE_TEMPLATE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(True, alias="LOG_JSON")
    default_tip_percentage: Decimal = Field(Decimal("10"), alias="DEFAULT_TIP_PERCENTAGE", ge=0)
    date_template: str = Field(DATE_TEMPLATE, alias="DATE_TEMPLATE")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
