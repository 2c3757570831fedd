"""State I/O for saving and loading a simulation snapshot."""

import json
import numpy as np
from typing import Tuple, Dict, Any, Optional
from pathlib import Path
from orbital_sim.physics.body import Body
from orbital_sim.physics.state import SimulationState
from orbital_sim.physics.vector import Vec2

_SCALAR_FIELDS = ("time_step", "time_multiplier", "gravity_constant", "elapsed_time")


def save_state(state: SimulationState, output_path: str, metadata: Optional[Dict[str, Any]] = None):
    """Save simulation state to file.
    
    Args:
        state: State to save
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary
    """
    output_path = Path(output_path)
    
    if output_path.suffix == '.npz':
        positions, velocities, masses, radii = state.to_arrays()
        save_dict = {
            'ids': np.array([b.id for b in state.bodies], dtype=np.int64),
            'positions': positions,
            'velocities': velocities,
            'masses': masses,
            'radii': radii,
            'colors': np.array([b.color for b in state.bodies], dtype=str),
            'is_running': np.array(state.is_running),
        }
        for name in _SCALAR_FIELDS:
            save_dict[name] = np.array(getattr(state, name))
        if metadata:
            # Only scalars survive the npz format
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)
    
    elif output_path.suffix == '.json':
        state_dict = state.to_dict()
        state_dict['metadata'] = metadata or {}
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)
    
    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_state(input_path: str) -> Tuple[SimulationState, Dict[str, Any]]:
    """Load simulation state from file.
    
    Args:
        input_path: Input file path
        
    Returns:
        Tuple of (state, metadata)
    """
    input_path = Path(input_path)
    
    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            positions = data['positions']
            velocities = data['velocities']
            bodies = [
                Body(
                    id=int(data['ids'][k]),
                    mass=float(data['masses'][k]),
                    position=Vec2(float(positions[k, 0]), float(positions[k, 1])),
                    velocity=Vec2(float(velocities[k, 0]), float(velocities[k, 1])),
                    radius=float(data['radii'][k]),
                    color=str(data['colors'][k]),
                )
                for k in range(len(data['ids']))
            ]
            scalars = {name: float(data[name]) for name in _SCALAR_FIELDS}
            state = SimulationState(bodies=bodies, is_running=bool(data['is_running']), **scalars)
            
            metadata = {}
            for key in data.keys():
                if key.startswith('metadata_'):
                    metadata[key[9:]] = data[key].item()
        
        return state, metadata
    
    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)
        
        metadata = state_dict.pop('metadata', {})
        return SimulationState.from_dict(state_dict), metadata
    
    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")
