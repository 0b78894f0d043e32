"""
Engine configuration loading.

Resolution order:
1. Explicit preset name (argument, then CHUK_HARMONY_PRESET)
2. YAML file named by the CHUK_HARMONY_CONFIG environment variable
3. Defaults (full MIDI range)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from chuk_mcp_harmony.constants import CONFIG_ENV_VAR, PRESET_ENV_VAR, BoundPreset
from chuk_mcp_harmony.models.config import EngineConfig

logger = logging.getLogger(__name__)


def load_config(preset: str | BoundPreset | None = None) -> EngineConfig:
    """
    Load the engine configuration.

    Args:
        preset: Optional preset name that takes precedence over the environment

    Returns:
        The resolved EngineConfig
    """
    preset = preset or os.environ.get(PRESET_ENV_VAR)
    if preset:
        return EngineConfig.for_preset(preset)

    config_path = os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        path = Path(config_path)
        logger.info(f"Loading engine config from {path}")
        return EngineConfig.from_yaml(path)

    return EngineConfig()
