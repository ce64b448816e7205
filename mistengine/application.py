"""The application object that owns the layers, scenes and main loop."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterable, Optional

from . import log
from .layers import Layer, LayerStack
from .physics import Physics
from .scene import SceneManager
from .shader import ShaderLibrary


class EventType(Enum):
    QUIT = auto()
    WINDOW_RESIZED = auto()


@dataclass(frozen=True)
class Event:
    """A window or input event; resize events carry the new size in data1/data2."""

    type: EventType
    data1: int = 0
    data2: int = 0


@dataclass
class Window:
    """Title, size and position of the application window."""

    title: str
    width: int = 1280
    height: int = 720
    x: int = 0
    y: int = 0


class Application:
    """Runs the frame loop: events, layer updates, physics, then rendering.

    Only one application may be open at a time; ``close`` releases it.
    """

    _instance: Optional["Application"] = None

    def __init__(self, name: str = "Application", width: int = 1280, height: int = 720,
                 max_delta_time: float = 0.1) -> None:
        log.init()
        if Application._instance is not None:
            raise RuntimeError("Created 2 application instances")
        Application._instance = self

        self.name = name
        self.window = Window(name, width, height)
        self.viewport = (0, 0, width, height)
        self.layer_stack = LayerStack()
        self.scene_manager = SceneManager()
        self.shader_library = ShaderLibrary()
        self.physics = Physics()
        self.camera = None
        self.running = True
        self.delta_time = 0.0
        self.max_delta_time = float(max_delta_time)
        self.frame_count = 0

    @classmethod
    def current(cls) -> "Application":
        """Return the open application."""
        if cls._instance is None:
            raise LookupError("no application is open")
        return cls._instance

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        self.viewport = (int(x), int(y), int(width), int(height))

    def push_layer(self, layer: Layer) -> None:
        self.layer_stack.push_layer(layer)

    def pop_layer(self, layer: Layer) -> None:
        self.layer_stack.pop_layer(layer)

    def quit(self) -> None:
        self.running = False

    def _handle_event(self, event: Event) -> None:
        if event.type is EventType.WINDOW_RESIZED:
            width, height = event.data1, event.data2
            if width > 0 and height > 0 and (
                self.window.width != width or self.window.height != height
            ):
                self.window.width = width
                self.window.height = height
                self.set_viewport(self.window.x, self.window.y, width, height)
        elif event.type is EventType.QUIT:
            self.quit()

        for layer in self.layer_stack:
            layer.on_event(event)

    def run_frame(self, events: Iterable[Event] = ()) -> None:
        """Process one frame using the current ``delta_time``."""
        for event in events:
            self._handle_event(event)

        for layer in self.layer_stack:
            layer.on_update()

        if self.scene_manager.loaded_scenes:
            self.physics.simulate(self.scene_manager.active_scene, self.delta_time)

        for layer in self.layer_stack:
            layer.on_render()

        self.frame_count += 1

    def run(self, event_source: Optional[Callable[[], Iterable[Event]]] = None) -> None:
        """Run frames until ``quit``; ``event_source`` is polled once per frame."""
        poll = event_source if event_source is not None else tuple
        last = time.perf_counter()
        try:
            while self.running:
                self.run_frame(poll())
                now = time.perf_counter()
                self.delta_time = min(now - last, self.max_delta_time)
                last = now
        except KeyboardInterrupt:
            self.quit()

    def close(self) -> None:
        """Detach all layers, clean up scenes and release the application."""
        self.layer_stack.clear()
        self.scene_manager.cleanup()
        if Application._instance is self:
            Application._instance = None