"""wakegate configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from wakegate.utils.mac import parse_mac


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "wakegate"
    debug: bool = False
    environment: str = "production"
    log_level: str = "INFO"

    # Network
    host: str = "127.0.0.1"
    port: int = 8000
    api_prefix: str = "/api"

    # Mode: dev = log instead of sending, prod = real packets
    mode: str = "prod"

    # Wake-on-LAN target (empty MAC disables the trigger)
    wol_mac: str = ""
    wol_host: str = ""
    wol_port: int = Field(default=0, ge=0, le=65535)  # 0 = UDP/9
    wol_paths: Annotated[list[str], NoDecode] = []  # path prefixes that fire the trigger, empty = all
    wol_preflight: bool = True  # resolve wol_host once at startup

    @property
    def is_dev_mode(self) -> bool:
        return self.mode == "dev"

    @property
    def wol_enabled(self) -> bool:
        return bool(self.wol_mac)

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="WAKEGATE_",
        extra="ignore",
    )

    @field_validator("wol_paths", mode="before")
    @classmethod
    def assemble_wol_paths(cls, value: list[str] | str | None) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            if value.startswith("["):
                return json.loads(value)
            return [p.strip() for p in value.split(",") if p.strip()]
        return value

    @field_validator("wol_mac")
    @classmethod
    def _check_mac(cls, value: str) -> str:
        value = value.strip()
        if value:
            parse_mac(value)  # MacFormatError is a ValueError
        return value

    @model_validator(mode="after")
    def _require_host(self) -> "Settings":
        if self.wol_mac and not self.wol_host.strip():
            raise ValueError("wol_host must be specified when wol_mac is set")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
