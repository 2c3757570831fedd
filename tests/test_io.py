"""Tests for I/O functionality."""

import os
import tempfile
import pytest
from orbital_sim.io.state_io import save_state, load_state
from orbital_sim.physics.simulator import Simulator


def running_state():
    sim = Simulator()
    sim.resume()
    sim.set_time_multiplier(2.0)
    sim.run(5)
    return sim.get_state()


def test_save_load_npz():
    """Test saving and loading NPZ format."""
    state = running_state()
    metadata = {"steps": 5, "preset": "solar_system"}
    
    with tempfile.NamedTemporaryFile(suffix='.npz', delete=False) as f:
        temp_path = f.name
    
    try:
        save_state(state, temp_path, metadata)
        
        loaded, loaded_meta = load_state(temp_path)
        
        assert loaded.to_dict() == state.to_dict()
        assert loaded_meta.get("steps") == 5
        assert loaded_meta.get("preset") == "solar_system"
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_save_load_json():
    """Test saving and loading JSON format."""
    state = running_state()
    
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        temp_path = f.name
    
    try:
        save_state(state, temp_path, {"steps": 5})
        
        loaded, loaded_meta = load_state(temp_path)
        
        assert loaded.to_dict() == state.to_dict()
        assert loaded.is_running is True
        assert loaded_meta == {"steps": 5}
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_loaded_state_resumes():
    """Test that a loaded state can drive a new simulator."""
    state = running_state()
    
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "state.json")
        save_state(state, path)
        loaded, _ = load_state(path)
    
    sim = Simulator(state=loaded)
    after = sim.step()
    assert after.elapsed_time == pytest.approx(state.elapsed_time + 0.02)


def test_unsupported_format():
    state = running_state()
    with pytest.raises(ValueError):
        save_state(state, "state.csv")
    with pytest.raises(ValueError):
        load_state("state.csv")
