from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import Any

from pydantic import BaseModel

from src.cruddemo.runtime.config.config_data import ConfigData
from src.cruddemo.runtime.config.config_template import load_config


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


_default_context = AppContext(config=load_config())

_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context."""
    return _app_context.set(context)


def _explicitly_set(model: BaseModel) -> dict[str, Any]:
    """Dump only the fields that were explicitly set, recursing into nested models.

    A nested model is included whole when any of its own fields were set, so
    the merge below can overlay it on the base configuration.
    """
    result: dict[str, Any] = {}
    for field_name in model.__class__.model_fields:
        value = getattr(model, field_name)
        if isinstance(value, BaseModel):
            nested = _explicitly_set(value)
            if nested:
                result[field_name] = nested
            elif field_name in model.model_fields_set:
                result[field_name] = value.model_dump()
        elif field_name in model.model_fields_set:
            result[field_name] = (
                [item.model_dump() if isinstance(item, BaseModel) else item for item in value]
                if isinstance(value, list)
                else value
            )
    return result


def _merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def merge_configs(
    base_config: ConfigData, override: ConfigData | dict[str, Any]
) -> ConfigData:
    """Overlay ``override`` on ``base_config`` and return a new validated config."""
    if isinstance(override, ConfigData):
        override_dict = _explicitly_set(override)
    elif isinstance(override, dict):
        override_dict = override
    else:
        raise ValueError(
            f"config_override must be ConfigData, dict, or None, got {type(override)}"
        )
    merged = _merge_dicts(base_config.model_dump(), override_dict)
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(
    config_override: ConfigData | dict[str, Any] | None = None,
) -> Iterator[AppContext]:
    """Temporarily override the application context.

    Overrides are merged with the current configuration, so a partial
    override inherits every value it does not name.

    Example:
        with with_context({"app": {"not_found_status": 404}}):
            assert get_config().app.not_found_status == 404
    """
    if config_override is None:
        yield get_context()
        return

    merged_config = merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield get_context()
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current configuration."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
