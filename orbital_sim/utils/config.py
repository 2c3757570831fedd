"""Configuration management."""

import json
import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, field


@dataclass
class Config:
    """Simulation configuration."""
    # Scenario
    preset: str = "solar_system"
    preset_params: Dict[str, Any] = field(default_factory=dict)
    steps: int = 1000
    
    # Engine parameters
    time_step: float = 0.01
    time_multiplier: float = 1.0
    gravity_constant: float = 6.67430e-1
    force_method: str = "vectorized"
    clamp_factor: float = 0.8
    restitution: float = 0.7
    correction_percent: float = 0.4
    
    # Output
    debug_every: int = 100
    render: bool = False
    show_trails: bool = False
    render_every: int = 5
    export_gif: bool = False
    fps: int = 30
    output_path: str = "output"
    save_state: Optional[str] = None


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
