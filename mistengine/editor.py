"""The editor: a scene view layer and the command that starts it."""

from __future__ import annotations

import argparse
from itertools import count
from typing import Optional

from . import mathutils as mu
from .application import Application, Event, EventType
from .camera import Camera
from .colliders import BoxCollider, Collider, Rigidbody
from .framebuffer import FramebufferProperties, FramebufferTextureFormat
from .layers import Layer
from .transform import Transform

VIEW_WIDTH = 1280
VIEW_HEIGHT = 720


class SceneWindow:
    """Builds the editor's demo scene and keeps its camera in sync."""

    def __init__(self, application: Application, shader_path=None) -> None:
        self.application = application
        self.shader_path = shader_path
        self.shader = None
        self.framebuffer_properties: Optional[FramebufferProperties] = None
        self.camera: Optional[Camera] = None
        self.entities: list[int] = []

    def _add_box(self, scene_manager, transform: Transform, velocity) -> int:
        entity = scene_manager.create_entity()
        scene_manager.add_component(entity, transform)
        scene_manager.add_component(entity, Rigidbody(1.0, 0.5, velocity))
        scene_manager.add_component(entity, Collider(BoxCollider((1.0, 1.0, 1.0))))
        return entity

    def initialize(self) -> None:
        app = self.application
        self.framebuffer_properties = FramebufferProperties(
            [FramebufferTextureFormat.RGBA8], VIEW_WIDTH, VIEW_HEIGHT
        )
        app.set_viewport(0, 0, VIEW_WIDTH, VIEW_HEIGHT)

        sm = app.scene_manager
        sm.load_empty_scene()

        if self.shader_path is not None:
            self.shader = app.shader_library.load(self.shader_path)

        self.entities.append(self._add_box(
            sm,
            Transform((3.0, 2.5, 0.0), mu.quat_from_euler((0.0, 0.0, 45.0)), (2.0, 2.0, 2.0)),
            (-1.0, 0.0, 0.0),
        ))
        self.entities.append(self._add_box(sm, Transform((-3.0, 3.0, 0.0)), (2.0, 0.0, 0.0)))

        camera_entity = sm.create_entity()
        camera_transform = sm.add_component(camera_entity, Transform((0.0, 0.0, -10.0)))
        self.camera = sm.add_component(camera_entity, Camera(camera_transform))
        self.camera.set_perspective(VIEW_WIDTH, VIEW_HEIGHT)
        self.entities.append(camera_entity)

    def cleanup(self) -> None:
        if self.shader is not None:
            self.shader.clear()

    def on_editor_update(self) -> None:
        """Match the scene camera's viewport to the application's viewport."""
        if self.camera is None:
            return
        _x, _y, width, height = self.application.viewport
        if width > 0 and height > 0 and (self.camera.width, self.camera.height) != (width, height):
            self.camera.set_viewport_size(width, height)

    def on_render(self) -> None:
        """Select the active scene's camera for rendering."""
        self.application.camera = self.application.scene_manager.update_scene_camera()


class EditorLayer(Layer):
    """Layer hosting the editor's scene window."""

    def __init__(self, application: Application, shader_path=None) -> None:
        super().__init__("EditorLayer")
        self.scene_window = SceneWindow(application, shader_path)

    def on_attach(self) -> None:
        self.scene_window.initialize()

    def on_detach(self) -> None:
        self.scene_window.cleanup()

    def on_update(self) -> None:
        self.scene_window.on_editor_update()

    def on_render(self) -> None:
        self.scene_window.on_render()

    def on_event(self, event) -> bool:
        """Return whether the event was consumed; the editor consumes none."""
        return False


def _frame_limit(frames: int):
    counter = count(1)

    def poll():
        return [Event(EventType.QUIT)] if next(counter) >= frames else []

    return poll


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="mist-editor", description="Run the scene editor.")
    parser.add_argument("--frames", type=int, default=None,
                        help="quit after this many frames")
    parser.add_argument("--shader", default=None, help="shader file to load")
    args = parser.parse_args(argv)

    app = Application("Editor")
    try:
        app.push_layer(EditorLayer(app, shader_path=args.shader))
        app.run(_frame_limit(args.frames) if args.frames is not None else None)
    finally:
        app.close()
    return 0