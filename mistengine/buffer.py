"""Vertex buffer layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class BufferElement:
    """One attribute of a vertex: its name, byte size and byte offset."""

    name: str
    size: int
    offset: int = 0


class BufferLayout:
    """Ordered elements of a vertex with their offsets and the total stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self._elements: list[BufferElement] = list(elements)
        self.stride = 0
        self._calculate_offsets_and_stride()

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(list(self._elements))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def push(self, element: BufferElement) -> None:
        self._elements.append(element)
        self._calculate_offsets_and_stride()

    def pop(self, element: BufferElement) -> None:
        """Remove ``element`` if present and recompute the offsets."""
        if element in self._elements:
            self._elements.remove(element)
        self._calculate_offsets_and_stride()

    def clear(self) -> None:
        self._elements.clear()
        self.stride = 0

    def _calculate_offsets_and_stride(self) -> None:
        offset = 0
        for element in self._elements:
            element.offset = offset
            offset += element.size
        self.stride = offset