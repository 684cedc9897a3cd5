"""Domain entities."""

from esdoc.domain.entities.map_document import MapDocument

__all__ = [
    "MapDocument",
]
