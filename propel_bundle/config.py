# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - BuildConfig (dataclass)
#     generator_command: str  (default "propel-gen")
#     project_name: str       (default "propel")
#     database_adapter: str   (default "mysql")
#     bundles_dir: str        (default "src/")
#     output_dir: str         (default "build/")
#     schema_pattern: str     (default "*schema.xml")
#
# - AppConfig (dataclass)
#     build: BuildConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from propel_bundle.config import get_config
#   config = get_config()
#   print(config.build.generator_command)
#
# ==============================================

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class BuildConfig:
    """Settings for the external model generator."""
    generator_command: str = "propel-gen"
    project_name: str = "propel"
    database_adapter: str = "mysql"
    bundles_dir: str = "src/"
    output_dir: str = "build/"
    schema_pattern: str = "*schema.xml"


@dataclass
class AppConfig:
    """Main application configuration."""
    build: BuildConfig


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    build_config = BuildConfig(
        generator_command=os.getenv("PROPEL_GENERATOR", "propel-gen"),
        project_name=os.getenv("PROPEL_PROJECT", "propel"),
        database_adapter=os.getenv("PROPEL_DATABASE_ADAPTER", "mysql"),
        bundles_dir=os.getenv("PROPEL_BUNDLES_DIR", "src/"),
        output_dir=os.getenv("PROPEL_OUTPUT_DIR", "build/"),
        schema_pattern=os.getenv("PROPEL_SCHEMA_PATTERN", "*schema.xml")
    )

    _config_instance = AppConfig(
        build=build_config,
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
