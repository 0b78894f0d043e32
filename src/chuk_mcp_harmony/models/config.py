"""
Engine configuration model.

The only recognized option is the absolute pitch bound every derived
pitch must respect. It can be given directly or by preset name.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_harmony.constants import PRESET_BOUNDS, BoundPreset, ErrorMessages
from chuk_mcp_harmony.core.pitch import MIDI_HIGHEST, MIDI_LOWEST, PitchSpace


class EngineConfig(BaseModel):
    """
    Query engine configuration.

    Example YAML:
        bound: [21, 108]
    or:
        preset: piano
    """

    bound: tuple[int, int] = Field(
        default=(MIDI_LOWEST, MIDI_HIGHEST),
        description="Inclusive (min, max) absolute pitch bound",
    )
    preset: BoundPreset | None = Field(
        default=None,
        description="Named bound; overrides 'bound' when set",
    )

    model_config = {"frozen": True}

    @field_validator("bound")
    @classmethod
    def validate_bound(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Bound must be ordered and inside the MIDI range."""
        lowest, highest = v
        if not MIDI_LOWEST <= lowest <= highest <= MIDI_HIGHEST:
            raise ValueError(ErrorMessages.INVALID_BOUND.format(bound=list(v)))
        return v

    @model_validator(mode="before")
    @classmethod
    def apply_preset(cls, data: Any) -> Any:
        """Replace the bound with the preset's range."""
        if isinstance(data, dict) and data.get("preset") is not None:
            preset = BoundPreset(data["preset"])
            data = {**data, "preset": preset, "bound": PRESET_BOUNDS[preset]}
        return data

    @classmethod
    def for_preset(cls, preset: str | BoundPreset) -> EngineConfig:
        """Build a config from a preset name like 'piano'."""
        try:
            return cls(preset=BoundPreset(preset))
        except ValueError:
            choices = ", ".join(p.value for p in BoundPreset)
            raise ValueError(
                ErrorMessages.UNKNOWN_PRESET.format(preset=preset, choices=choices)
            ) from None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> EngineConfig:
        """Parse config from a YAML mapping."""
        data = data or {}
        if "bound" in data:
            data = {**data, "bound": tuple(data["bound"])}
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> EngineConfig:
        """Load config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    def pitch_space(self) -> PitchSpace:
        """The pitch space described by this config."""
        return PitchSpace(*self.bound)
