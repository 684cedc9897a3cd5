"""Document port - identity, version and JSON rendering of a search document."""

from typing import Protocol


class Document(Protocol):
    """Capability consumed by the object-document mapping layer.

    Mapping access (get/put/remove/iteration) is a separate capability,
    provided through ``collections.abc.MutableMapping``.
    """

    def has_id(self) -> bool: ...

    @property
    def id(self) -> str:
        """Raises IllegalState when no id is set."""
        ...

    @id.setter
    def id(self, value: str) -> None: ...

    def has_version(self) -> bool: ...

    @property
    def version(self) -> int:
        """Raises IllegalState when no version is set."""
        ...

    @version.setter
    def version(self, value: int) -> None: ...

    def to_json(self) -> str:
        """Raises SerializationFailure when the content cannot be rendered."""
        ...
