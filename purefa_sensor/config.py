# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

import logging
import os
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from purefa_sensor.errors import InvalidArgumentsError, MissingParameterError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

# CLI flag names, used in messages about missing parameters
REQUIRED_PARAMETERS = (
    ('api_token', '--api-token'),
    ('address', '--address'),
)


class SensorConfig(BaseModel):
    """Everything one sensor run needs. Built once, passed into run_sensor()."""
    api_token: Optional[str] = None
    address: Optional[str] = None
    tls_validation: Literal['strict', 'normal', 'none'] = 'strict'
    tls_ca: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    rest_version: Optional[str] = Field(default=None, pattern=r'^2\.\d+$')
    parallel: bool = False

    def validate_required(self) -> None:
        """Raise MissingParameterError for the first absent or blank required value."""
        for field_name, flag in REQUIRED_PARAMETERS:
            value = getattr(self, field_name)
            if value is None or not str(value).strip():
                raise MissingParameterError(f"{field_name} ({flag})")


class FileConfig(BaseModel):
    # Same keys as SensorConfig, all optional, read from YAML
    api_token: Optional[str] = None
    address: Optional[str] = None
    tls_validation: Optional[str] = None
    tls_ca: Optional[str] = None
    timeout: Optional[float] = None
    rest_version: Optional[str] = None
    parallel: Optional[bool] = None

    model_config = {'extra': 'ignore'}


class EnvConfig(BaseSettings):
    # PUREFA_API_TOKEN, PUREFA_ADDRESS, PUREFA_TLS_VALIDATION, ...
    api_token: Optional[str] = None
    address: Optional[str] = None
    tls_validation: Optional[str] = None
    tls_ca: Optional[str] = None
    timeout: Optional[float] = None
    rest_version: Optional[str] = None
    parallel: Optional[bool] = None

    model_config = SettingsConfigDict(
        env_prefix='PUREFA_',
        case_sensitive=False,
        extra='ignore',  # Ignore unrelated PUREFA_* variables
    )


def _load_file_config(config_file: str) -> Dict[str, Any]:
    """Read the YAML config file and return only the keys it sets."""
    if not os.path.exists(config_file):
        raise InvalidArgumentsError(f"Config file not found: {config_file}")

    logger.debug(f"Loading configuration from file: {config_file}")
    try:
        with open(config_file, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InvalidArgumentsError(f"Failed to read config file {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidArgumentsError(f"Config file {config_file} must contain a mapping")

    try:
        return FileConfig(**data).model_dump(exclude_none=True)
    except ValidationError as e:
        raise InvalidArgumentsError(f"Invalid config file {config_file}: {e}") from e


def load_settings(args=None, env_file: Optional[str] = '.env') -> SensorConfig:
    """
    Build the SensorConfig for this run.

    Precedence, lowest to highest: YAML file (``args.config``), environment
    variables (optionally loaded from ``env_file``), command line arguments.

    Args:
        args: argparse namespace; attributes left at None are not applied
        env_file: dotenv file to load before reading the environment, or None

    Returns:
        Merged SensorConfig. Required parameters are not checked here.

    Raises:
        InvalidArgumentsError: config file unreadable or a value is invalid
    """
    if env_file:
        load_dotenv(dotenv_path=env_file, override=False)

    merged: Dict[str, Any] = {}

    config_file = getattr(args, 'config', None)
    if config_file:
        merged.update(_load_file_config(config_file))

    try:
        env_values = EnvConfig().model_dump(exclude_none=True)
    except ValidationError as e:
        raise InvalidArgumentsError(f"Invalid PUREFA_* environment variable: {e}") from e
    if env_values:
        logger.debug(f"Environment overrides: {sorted(env_values)}")
    merged.update(env_values)

    if args is not None:
        for key in SensorConfig.model_fields:
            value = getattr(args, key, None)
            if value is not None:
                merged[key] = value

    try:
        return SensorConfig(**merged)
    except ValidationError as e:
        raise InvalidArgumentsError(f"Invalid configuration: {e}") from e
