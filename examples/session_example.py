"""Drive a simulation through the command-style session, as a UI host would."""

import threading
import time
from orbital_sim import SimulationSession


def main():
    session = SimulationSession()
    session.invoke("set_simulation_running", running=True)
    
    # A background "frame loop" steps while the main thread edits and reads
    stop = threading.Event()
    
    def frame_loop():
        while not stop.is_set():
            session.invoke("step_simulation")
            time.sleep(0.001)
    
    worker = threading.Thread(target=frame_loop)
    worker.start()
    
    session.invoke("set_time_multiplier", multiplier=5.0)
    session.invoke("update_body", id=2, mass=4000.0, color="#ff0000")
    time.sleep(0.5)
    
    stop.set()
    worker.join()
    
    state = session.invoke("get_simulation_state")
    print(f"Elapsed time: {state['elapsed_time']:.2f}")
    for body in state["bodies"]:
        pos = body["position"]
        print(f"  body {body['id']}: mass={body['mass']:.0f} at ({pos['x']:.1f}, {pos['y']:.1f})")


if __name__ == "__main__":
    main()
