"""Tests for the simulator controller."""

import math
import numpy as np
import pytest
from orbital_sim.physics.body import BodyPatch
from orbital_sim.physics.simulator import Simulator, create_default
from orbital_sim.presets import TwoBody
from orbital_sim.utils.config import Config

G = 0.66743


def test_paused_step_is_noop():
    """Test that stepping while paused changes nothing."""
    sim = Simulator()
    before = sim.get_state()
    
    after = sim.step()
    
    assert after.to_dict() == before.to_dict()
    assert after.elapsed_time == 0.0
    assert sim.step_count == 0


def test_two_body_circular_orbit():
    """Test near-circular stability over one step."""
    sim = Simulator(preset=TwoBody(central_mass=8000.0, satellite_mass=1000.0, distance=120.0))
    satellite = sim.get_state().bodies[1]
    assert satellite.velocity.y == pytest.approx(math.sqrt(G * 8000.0 / 120.0))
    
    sim.set_time_multiplier(1.0)
    sim.set_running(True)
    state = sim.step()
    
    satellite = state.bodies[1]
    radius = math.hypot(satellite.position.x, satellite.position.y)
    assert abs(radius - 120.0) < 0.01 * 120.0
    assert state.elapsed_time == pytest.approx(0.01)


def test_two_body_orbit_stays_bounded():
    """Test that the symplectic step keeps the orbit near its radius over many steps."""
    sim = Simulator(preset=TwoBody(central_mass=8000.0, satellite_mass=1.0))
    sim.resume()
    
    radii = []
    for _ in range(2000):
        state = sim.step()
        rel_x = state.bodies[1].position.x - state.bodies[0].position.x
        rel_y = state.bodies[1].position.y - state.bodies[0].position.y
        radii.append(math.hypot(rel_x, rel_y))
    
    assert max(radii) < 120.0 * 1.05
    assert min(radii) > 120.0 * 0.95


def test_elapsed_time_uses_multiplier():
    sim = Simulator()
    sim.resume()
    sim.set_time_multiplier(2.0)
    
    state = sim.run(3)
    
    assert state.elapsed_time == pytest.approx(0.06)
    assert sim.step_count == 3


def test_negative_multiplier_runs_backward():
    """Test that a negative multiplier is accepted and rewinds the clock."""
    sim = Simulator()
    sim.resume()
    sim.set_time_multiplier(-1.0)
    
    state = sim.step()
    
    assert state.time_multiplier == -1.0
    assert state.elapsed_time == pytest.approx(-0.01)


def test_update_body_partial():
    """Test that only mass changes and the next step uses it."""
    sim = Simulator(preset=TwoBody())
    before = sim.get_state().bodies[1]
    
    assert sim.update_body(2, mass=2000.0) is True
    
    after = sim.get_state().bodies[1]
    assert after.mass == 2000.0
    assert after.position == before.position
    assert after.velocity == before.velocity
    assert after.radius == before.radius
    assert after.color == before.color
    
    sim.resume()
    state = sim.step()
    # Central body acceleration is G * m_satellite / d^2 toward +x
    expected_vx = G * 2000.0 / 120.0 ** 2 * 0.01
    assert state.bodies[0].velocity.x == pytest.approx(expected_vx, rel=1e-9)


def test_update_body_with_patch():
    sim = Simulator()
    sim.update_body(3, BodyPatch(position_x=1.0, color="#123456"))
    body = sim.get_state().find_body(3)
    assert body.position.x == 1.0
    assert body.color == "#123456"


def test_update_unknown_body_is_ignored():
    sim = Simulator()
    before = sim.get_state()
    
    assert sim.update_body(99, mass=1.0, radius=5.0) is False
    assert sim.get_state().to_dict() == before.to_dict()


def test_snapshots_are_copies():
    """Test that callers cannot reach engine-owned state."""
    sim = Simulator()
    snapshot = sim.get_state()
    snapshot.bodies[0].mass = -5.0
    snapshot.is_running = True
    
    state = sim.get_state()
    assert state.bodies[0].mass == 8000.0
    assert state.is_running is False


def test_initial_state_is_copied():
    state = create_default()
    sim = Simulator(state=state)
    state.bodies[0].mass = 1.0
    assert sim.get_state().bodies[0].mass == 8000.0


def test_set_running_only_toggles_flag():
    sim = Simulator()
    before = sim.get_state().to_dict()
    
    sim.set_running(True)
    after = sim.get_state().to_dict()
    
    assert after["is_running"] is True
    after["is_running"] = False
    assert after == before


def test_reset():
    """Test that reset discards all changes."""
    sim = Simulator()
    sim.resume()
    sim.set_time_multiplier(5.0)
    sim.update_body(1, mass=1.0)
    sim.run(10)
    
    state = sim.reset()
    
    assert state.to_dict() == create_default().to_dict()
    assert sim.step_count == 0


def test_momentum_conserved():
    """Test total momentum over many steps of the default scenario."""
    sim = Simulator()
    p0 = sim.get_momentum()
    sim.resume()
    sim.run(200)
    
    assert np.allclose(sim.get_momentum(), p0, rtol=1e-9, atol=1e-6)


def test_coincident_bodies_stay_finite():
    """Test that placing two bodies on top of each other does not poison the state."""
    sim = Simulator(preset=TwoBody())
    sim.update_body(2, position_x=0.0, position_y=0.0)
    sim.resume()
    
    state = sim.run(5)
    
    positions, velocities, _, _ = state.to_arrays()
    assert np.all(np.isfinite(positions))
    assert np.all(np.isfinite(velocities))


def test_body_count_and_ids_stable():
    sim = Simulator()
    ids = [b.id for b in sim.get_state().bodies]
    sim.resume()
    state = sim.run(50)
    assert [b.id for b in state.bodies] == ids


def test_direct_and_vectorized_simulations_agree():
    from orbital_sim.physics.force_calculator import ForceCalculator
    
    fast = Simulator(force_calculator=ForceCalculator(method="vectorized"))
    slow = Simulator(force_calculator=ForceCalculator(method="direct"))
    for sim in (fast, slow):
        sim.resume()
        sim.run(20)
    
    fast_pos, _, _, _ = fast.get_state().to_arrays()
    slow_pos, _, _, _ = slow.get_state().to_arrays()
    assert np.allclose(fast_pos, slow_pos, rtol=1e-9, atol=1e-9)


def test_from_config():
    config = Config(preset="head_on", time_step=0.02, time_multiplier=0.5, restitution=0.3,
                    preset_params={"separation": 15.0})
    sim = Simulator.from_config(config)
    state = sim.get_state()
    
    assert len(state.bodies) == 2
    assert state.time_step == 0.02
    assert state.time_multiplier == 0.5
    assert sim.collision_resolver.restitution == 0.3
    assert state.bodies[0].position.distance(state.bodies[1].position) == pytest.approx(15.0)


def test_update_body_merges_patch_and_keywords():
    """Test that keyword fields are applied together with an explicit patch."""
    sim = Simulator(preset=TwoBody())
    
    sim.update_body(2, BodyPatch(color="#000000", radius=3.0), mass=5.0, radius=4.0)
    
    body = sim.get_state().find_body(2)
    assert body.mass == 5.0
    assert body.color == "#000000"
    assert body.radius == 4.0


def test_from_config_preset_params_override_clock_and_gravity():
    config = Config(preset="two_body", time_step=0.01,
                    preset_params={"time_step": 0.02, "gravity_constant": 2.0})
    state = Simulator.from_config(config).get_state()
    
    assert state.time_step == 0.02
    assert state.gravity_constant == 2.0
