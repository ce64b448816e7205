"""Entity-component scenes and the manager that holds them."""

from __future__ import annotations

from typing import Any, Iterator

from .camera import Camera
from .log import get_logger


class Scene:
    """A registry of entities, each holding at most one component per type."""

    def __init__(self) -> None:
        self._next_id = 0
        self._entities: dict[int, dict[type, Any]] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._entities))

    def _components(self, entity: int) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"unknown entity {entity}") from None

    def create(self) -> int:
        entity = self._next_id
        self._next_id += 1
        self._entities[entity] = {}
        return entity

    def destroy(self, entity: int) -> None:
        self._components(entity)
        del self._entities[entity]

    def add_component(self, entity: int, component):
        """Attach ``component`` to ``entity``, replacing one of the same type."""
        self._components(entity)[type(component)] = component
        return component

    def get(self, entity: int, component_type: type):
        try:
            return self._components(entity)[component_type]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {component_type.__name__} component"
            ) from None

    def try_get(self, entity: int, component_type: type):
        return self._entities.get(entity, {}).get(component_type)

    def view(self, *args: type) -> Iterator[tuple]:
        """Yield ``(entity, component, ...)`` for entities holding all given types."""
        if not args:
            raise ValueError("view needs at least one component type")
        for entity, components in list(self._entities.items()):
            if all(t in components for t in args):
                yield (entity, *(components[t] for t in args))

    def components(self, entity: int) -> list:
        return list(self._components(entity).values())

    def clear(self) -> None:
        self._entities.clear()


class SceneManager:
    """Holds the loaded scenes and forwards entity operations to the active one."""

    def __init__(self) -> None:
        self.loaded_scenes: list[Scene] = []
        self.active_scene_index = 0

    @property
    def active_scene(self) -> Scene:
        try:
            return self.loaded_scenes[self.active_scene_index]
        except IndexError:
            raise LookupError("no active scene is loaded") from None

    def load_empty_scene(self) -> Scene:
        scene = Scene()
        self.loaded_scenes.append(scene)
        get_logger().info("Loaded empty scene")
        return scene

    def load_scene(self) -> None:
        """Scene files have no loader yet; this only reports so."""
        get_logger().warning("Currently not implemented")

    def create_entity(self) -> int:
        return self.active_scene.create()

    def destroy_entity(self, entity: int) -> None:
        self.active_scene.destroy(entity)

    def add_component(self, entity: int, component):
        return self.active_scene.add_component(entity, component)

    def update_scene_camera(self):
        """Return the first camera in the active scene, or None."""
        for _entity, camera in self.active_scene.view(Camera):
            return camera
        return None

    def cleanup(self) -> None:
        """Release component resources and empty every loaded scene."""
        for scene in self.loaded_scenes:
            for entity in scene:
                for component in scene.components(entity):
                    release = getattr(component, "clear", None)
                    if callable(release):
                        release()
            scene.clear()