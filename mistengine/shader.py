"""Shaders and the library that stores them by name."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional


@dataclass(eq=False)
class Shader:
    """A named shader program, built from a file or from stage sources."""

    name: str
    vertex_source: str = ""
    fragment_source: str = ""
    source: str = ""
    path: Optional[Path] = None
    bound: bool = field(default=False, init=False)

    @classmethod
    def from_file(cls, path) -> "Shader":
        """Read a shader file; the shader is named after the file's stem."""
        path = Path(path)
        return cls(name=path.stem, source=path.read_text(encoding="utf-8"), path=path)

    def bind(self) -> None:
        self.bound = True

    def clear(self) -> None:
        """Release the shader's program."""
        self.bound = False


class ShaderLibrary:
    """Stores shaders by unique name."""

    def __init__(self) -> None:
        self._shaders: dict[str, Shader] = {}

    def __len__(self) -> int:
        return len(self._shaders)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._shaders))

    def __contains__(self, name: object) -> bool:
        return name in self._shaders

    def add(self, shader: Shader, name: Optional[str] = None) -> None:
        """Store ``shader`` under ``name`` or under its own name."""
        key = shader.name if name is None else name
        if self.exists(key):
            raise ValueError(f"Shader already exists: {key}")
        self._shaders[key] = shader

    def load(self, path, name: Optional[str] = None) -> Shader:
        """Create a shader from ``path``, store it and return it."""
        shader = Shader.from_file(path)
        self.add(shader, name)
        return shader

    def get(self, name: str) -> Shader:
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"Shader not found: {name}") from None

    def exists(self, name: str) -> bool:
        return name in self._shaders