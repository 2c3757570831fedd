"""Preset scenario generators."""

from typing import List
from orbital_sim.presets.base import Preset
from orbital_sim.presets.solar_system import SolarSystem
from orbital_sim.presets.two_body import TwoBody
from orbital_sim.presets.collision import HeadOnCollision

PRESETS = {
    "solar_system": SolarSystem,
    "two_body": TwoBody,
    "head_on": HeadOnCollision,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


def list_presets() -> List[str]:
    return list(PRESETS.keys())


__all__ = [
    "Preset",
    "SolarSystem",
    "TwoBody",
    "HeadOnCollision",
    "get_preset",
    "list_presets",
]
