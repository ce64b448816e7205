"""Layers receive the application's lifecycle callbacks in stack order."""

from __future__ import annotations

from typing import Any, Iterator


class Layer:
    """Base class for a named layer that tracks its lifecycle state.

    Subclasses override the hooks they need; calling the base hook keeps
    the bookkeeping attributes up to date.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.update_count = 0
        self.render_count = 0
        self.last_event: Any = None

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from a stack."""
        self.attached = False

    def on_update(self) -> None:
        """Called once per frame before rendering."""
        self.update_count += 1

    def on_render(self) -> None:
        """Called once per frame while rendering."""
        self.render_count += 1

    def on_event(self, event) -> None:
        """Called for each input or window event."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Ordered collection of layers."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def __contains__(self, layer: object) -> bool:
        return layer in self._layers

    def push_layer(self, layer: Layer) -> None:
        self._layers.append(layer)
        layer.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Detach ``layer`` and remove it if it is in the stack."""
        layer.on_detach()
        if layer in self._layers:
            self._layers.remove(layer)

    def clear(self) -> None:
        """Detach every layer and empty the stack."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()