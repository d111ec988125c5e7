"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.cruddemo.runtime.config.config_data import ConfigData
from src.cruddemo.runtime.config.settings import EnvironmentVariables

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")
_COMMENT_LINE = re.compile(r"^\s*#.*$", re.MULTILINE)


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """

    def replacer(match: re.Match) -> str:
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        # Handle error messages: ${VAR:?message}
        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = os.getenv(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return _PLACEHOLDER.sub(replacer, text)


def _apply_environment_prefix(env_mode: str) -> None:
    """Promote ``<ENV>_<VAR>`` variables to ``<VAR>`` for the active environment."""
    prefix = f"{env_mode.upper()}_"
    env_variables = [
        (var, value) for var, value in os.environ.items() if var.startswith(prefix)
    ]
    for var_name, var_value in env_variables:
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)


def load_templated_yaml(
    file_path: Path, env_vars: EnvironmentVariables | None = None
) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_vars: Environment settings; read from the process and .env when omitted

    Returns:
        Validated configuration

    Raises:
        ValueError: If required environment variables are missing or the
            content does not validate
        FileNotFoundError: If the YAML file doesn't exist
    """
    env_vars = env_vars or EnvironmentVariables()

    with open(file_path, encoding="utf-8") as f:
        content = f.read()

    env_mode = env_vars.app_environment
    logger.info("Loading configuration for environment: {}", env_mode)
    _apply_environment_prefix(env_mode)

    # Comment lines may mention placeholder syntax; drop them before substituting.
    substituted_content = substitute_env_vars(_COMMENT_LINE.sub("", content))

    try:
        loaded = yaml.safe_load(substituted_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not loaded:
        raise ValueError(f"Configuration file {file_path} is empty")

    try:
        config = ConfigData(**loaded.get("config", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    return apply_env_overrides(config, env_vars)


def apply_env_overrides(config: ConfigData, env_vars: EnvironmentVariables) -> ConfigData:
    """Apply the direct environment overrides on top of a loaded configuration."""
    config.app.environment = env_vars.app_environment
    if env_vars.log_level:
        config.logging.level = env_vars.log_level
    if env_vars.database_url:
        config.database.url = env_vars.database_url
    return config


def load_config() -> ConfigData:
    """Load the configuration named by ``APP_CONFIG_FILE``, falling back to defaults."""
    env_vars = EnvironmentVariables()
    config_path = Path(env_vars.app_config_file)
    if not config_path.exists():
        logger.warning(
            "Configuration file {} not found; using built-in defaults", config_path
        )
        return apply_env_overrides(ConfigData(), env_vars)
    return load_templated_yaml(config_path, env_vars)
