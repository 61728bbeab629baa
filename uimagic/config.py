from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .ir import Framework, StylingSystem


DEFAULT_CONFIG_PATH = "config/default.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class GenerationConfig(BaseModel):
    default_framework: Framework = Field(default="react")
    default_styling: StylingSystem = Field(default="tailwind")
    templates_dir: Optional[str] = Field(default=None, description="Template root; None uses the bundled templates")


class ServerConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)


class McpConfig(BaseModel):
    name: str = Field(default="uimagic")
    transport: str = Field(default="stdio")


class TracingConfig(BaseModel):
    enabled: bool = Field(default=False)
    dir: str = Field(default="./data/traces")


class LoggingConfig(BaseModel):
    level: LogLevel = Field(default="INFO")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseModel):
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)
    tracing: TracingConfig = Field(default_factory=TracingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Optional[str] = None) -> AppConfig:
    config_path = Path(path or DEFAULT_CONFIG_PATH)
    if not config_path.exists():
        if path:
            raise ConfigError(f"Config file {config_path} does not exist")
        return AppConfig()
    with config_path.open("r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    try:
        return AppConfig(**raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {config_path}", details={"errors": exc.errors()}) from exc
