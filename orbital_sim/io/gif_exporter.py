"""Animated GIF recording of a running simulation."""

import os
from typing import List
import imageio.v3 as iio
import numpy as np
from orbital_sim.physics.state import SimulationState


class GIFExporter:
    """Records simulation snapshots through a renderer and writes a looping GIF.

    Frames can come from an attached renderer via record(), or be pushed
    directly with add_frame() (RGB arrays, uint8 or floats in [0, 1]).
    """

    def __init__(self, output_path: str, renderer=None, fps: int = 30):
        self.output_path = output_path
        self.renderer = renderer
        self.fps = fps
        self.frames: List[np.ndarray] = []

    @property
    def frame_duration_ms(self) -> float:
        return 1000.0 / self.fps

    def record(self, state: SimulationState):
        """Draw state with the attached renderer and keep the resulting frame."""
        if self.renderer is None:
            raise RuntimeError("No renderer attached to GIFExporter")
        self.renderer.render(state)
        self.add_frame(self.renderer.capture_frame())

    def add_frame(self, frame: np.ndarray):
        if frame.dtype != np.uint8:
            frame = (np.clip(frame, 0.0, 1.0) * 255).astype(np.uint8)
        if self.frames and frame.shape != self.frames[0].shape:
            raise ValueError(
                f"Frame shape {frame.shape} does not match first frame {self.frames[0].shape}"
            )
        self.frames.append(frame.copy())

    def export(self) -> str:
        """Write the recorded frames and return the output path."""
        if not self.frames:
            raise ValueError("No frames to export")

        directory = os.path.dirname(self.output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        # loop=0 repeats forever
        iio.imwrite(
            self.output_path,
            np.stack(self.frames),
            duration=self.frame_duration_ms,
            loop=0,
        )
        return self.output_path
