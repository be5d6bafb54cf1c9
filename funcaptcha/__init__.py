"""Default FunCaptcha public keys and presets for Roblox flows."""

from .errors import FlowNotFoundError, InvalidConfigError
from .table import (
    DEFAULT_KEYS,
    DEFAULT_PRESETS,
    DEFAULT_TABLE,
    FlowTable,
    get_config,
    lookup_key,
    lookup_preset,
)
from .utils import Args, Flow, FlowConfig, OutputFormat

__all__ = [
    "Args",
    "DEFAULT_KEYS",
    "DEFAULT_PRESETS",
    "DEFAULT_TABLE",
    "Flow",
    "FlowConfig",
    "FlowNotFoundError",
    "FlowTable",
    "InvalidConfigError",
    "OutputFormat",
    "get_config",
    "lookup_key",
    "lookup_preset",
]
