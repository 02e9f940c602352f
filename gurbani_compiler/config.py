"""Configuration loader for the Gurbani JSON compiler."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from gurbani_compiler.models.reference import REFERENCE_MODELS


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Gurbani JSON Compiler"
    version: str = "1.0.0"


class StorageConfig(BaseModel):
    """Storage paths configuration."""

    database_path: str = "./build/database.sqlite"
    output_dir: str = "./data"
    staging_dir: str = "./data.tmp"


class CompileConfig(BaseModel):
    """Compilation stage configuration."""

    simple_tables: list[str] = Field(
        default_factory=lambda: ["writers", "languages", "line_types", "publications"]
    )
    max_workers: int = 4
    indent: int = 2

    @field_validator("simple_tables")
    @classmethod
    def check_known_tables(cls, tables: list[str]) -> list[str]:
        unknown = [name for name in tables if name not in REFERENCE_MODELS]
        if unknown:
            raise ValueError(f"Unknown reference table(s): {', '.join(unknown)}")
        return tables


class LoggingConfig(BaseModel):
    """Console logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    compile: CompileConfig = Field(default_factory=CompileConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override storage locations from environment
    database_path = os.getenv("GURBANI_DATABASE_PATH")
    if database_path:
        config.storage.database_path = database_path
    output_dir = os.getenv("GURBANI_OUTPUT_DIR")
    if output_dir:
        config.storage.output_dir = output_dir

    return config
