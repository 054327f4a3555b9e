"""Sketch container: a named, transformable group of entities."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from sketch_dxf.geometry.transformation import Transformation
from sketch_dxf.model.entities import Entity


@dataclass
class Sketch:
    """Ordered group of entities and nested sketches.

    A sketch has no extent of its own. Its ``transformation`` applies to every
    child and is composed with the transformations of enclosing sketches.
    """
    name: str = ""
    geometry: List[Union[Entity, "Sketch"]] = field(default_factory=list)
    transformation: Optional[Transformation] = None

    def push(self, node: Union[Entity, "Sketch"]) -> "Sketch":
        """Append a child node and return ``self``."""
        self.geometry.append(node)
        return self

    def walk(self) -> Iterator[Entity]:
        """Yield every primitive entity, depth-first in declaration order."""
        for node in self.geometry:
            if isinstance(node, Sketch):
                yield from node.walk()
            else:
                yield node

    def __len__(self) -> int:
        return len(self.geometry)
