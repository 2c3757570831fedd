"""Tests for the lock-guarded session adapter."""

import threading
import pytest
from orbital_sim.physics.simulator import Simulator, create_default
from orbital_sim.session import SimulationSession


def test_state_is_plain_dict():
    session = SimulationSession()
    state = session.get_simulation_state()
    
    assert state == create_default().to_dict()
    assert set(state) == {"bodies", "time_step", "time_multiplier", "gravity_constant", "is_running", "elapsed_time"}
    assert set(state["bodies"][0]) == {"id", "mass", "position", "velocity", "radius", "color"}


def test_step_respects_running_flag():
    session = SimulationSession()
    
    assert session.step_simulation()["elapsed_time"] == 0.0
    
    session.set_simulation_running(True)
    state = session.step_simulation()
    assert state["elapsed_time"] == pytest.approx(0.01)
    assert state["is_running"] is True


def test_invoke_dispatch():
    """Test dispatch by command name with keyword arguments."""
    session = SimulationSession()
    
    session.invoke("set_time_multiplier", multiplier=3.0)
    session.invoke("update_body", id=2, mass=42.0, color="#00ff00")
    session.invoke("set_simulation_running", running=True)
    state = session.invoke("step_simulation")
    
    body = next(b for b in state["bodies"] if b["id"] == 2)
    assert body["mass"] == 42.0
    assert body["color"] == "#00ff00"
    assert body["radius"] == 10.0
    assert state["time_multiplier"] == 3.0
    assert state["elapsed_time"] == pytest.approx(0.03)


def test_update_unknown_id_is_silent():
    session = SimulationSession()
    before = session.get_simulation_state()
    session.update_body(id=1000, mass=1.0)
    assert session.get_simulation_state() == before


def test_reset_simulation():
    session = SimulationSession()
    session.set_simulation_running(True)
    session.set_time_multiplier(4.0)
    session.step_simulation()
    
    session.reset_simulation()
    
    assert session.get_simulation_state() == create_default().to_dict()


def test_unknown_command():
    session = SimulationSession()
    with pytest.raises(ValueError):
        session.invoke("delete_everything")
    assert "step_simulation" in session.commands


def test_sessions_are_independent():
    a = SimulationSession()
    b = SimulationSession(Simulator())
    a.set_simulation_running(True)
    a.step_simulation()
    
    assert b.get_simulation_state()["elapsed_time"] == 0.0


def test_concurrent_steps_are_serialized():
    """Test that steps from several threads all land, none lost or interleaved."""
    session = SimulationSession()
    session.set_simulation_running(True)
    n_threads = 4
    steps_per_thread = 25
    
    def worker():
        for _ in range(steps_per_thread):
            session.step_simulation()
            session.get_simulation_state()
    
    threads = [threading.Thread(target=worker) for _ in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    
    state = session.get_simulation_state()
    assert state["elapsed_time"] == pytest.approx(n_threads * steps_per_thread * 0.01)
