"""Scene, camera and rigid-body physics engine with a headless editor loop."""

__version__ = "0.1.0"