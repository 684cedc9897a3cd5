"""MapDocument entity - ordered key/value search document with id and version."""

from collections.abc import (
    Callable,
    ItemsView,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from typing import Any, ClassVar, TypeVar

from esdoc.domain.exceptions import IllegalState, ParsingFailure, SerializationFailure
from esdoc.domain.json_codec import JsonCodec
from esdoc.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _freeze(value: Any) -> Any:
    """Hashable equivalent of a (possibly nested) content value."""
    if isinstance(value, Mapping):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    return value


class MapDocument(MutableMapping[str, Any]):
    """
    Document backed by an insertion-ordered dict.

    Content entries are reached through the mapping interface. ``id`` and
    ``version`` are optional metadata: reading either one before it was set
    raises IllegalState, so check ``has_id()`` / ``has_version()`` first.

    Equality and hashing look at the content entries only. Two documents with
    the same entries but different id or version compare equal.

    Not thread-safe for concurrent mutation, same as dict.

    Documents built without ``codec=`` render through ``codec_provider``,
    which the package composition root (``esdoc.main``) points at the shared
    process-wide codec.
    """

    codec_provider: ClassVar[Callable[[], JsonCodec] | None] = None

    def __init__(
        self,
        document_as_map: Mapping[str, Any] | None = None,
        *,
        codec: JsonCodec | None = None,
    ) -> None:
        # Always a private copy: later changes to the source mapping must not leak in.
        self._content: dict[str, Any] = dict(document_as_map) if document_as_map is not None else {}
        self._codec = codec
        self._id: str | None = None
        self._version: int | None = None

    @classmethod
    def _default_codec(cls) -> JsonCodec:
        if cls.codec_provider is None:
            raise IllegalState("No JSON codec configured for documents")
        return cls.codec_provider()

    @property
    def codec(self) -> JsonCodec:
        """The injected codec, else the one from codec_provider."""
        return self._codec if self._codec is not None else self._default_codec()

    # --- identity / version ---

    def has_id(self) -> bool:
        return self._id is not None

    @property
    def id(self) -> str:
        if not self.has_id():
            raise IllegalState("No Id associated with this Document")
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = value

    def has_version(self) -> bool:
        return self._version is not None

    @property
    def version(self) -> int:
        if not self.has_version():
            raise IllegalState("No version associated with this Document")
        return self._version

    @version.setter
    def version(self, value: int) -> None:
        # Stored as given. A bool is accepted here but renders as JSON true/false,
        # which from_json rejects, so only int versions round-trip.
        self._version = value

    # --- mapping protocol ---

    def __getitem__(self, key: str) -> Any:
        return self._content[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._content[key] = value

    def __delitem__(self, key: str) -> None:
        del self._content[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._content)

    def __len__(self) -> int:
        return len(self._content)

    def __contains__(self, key: object) -> bool:
        return key in self._content

    def get(self, key: str, default: Any = None) -> Any:
        return self._content.get(key, default)

    def keys(self) -> KeysView[str]:
        """Live view of the content keys."""
        return self._content.keys()

    def values(self) -> ValuesView[Any]:
        """Live view of the content values."""
        return self._content.values()

    def items(self) -> ItemsView[str, Any]:
        """Live view of the content entries."""
        return self._content.items()

    def clear(self) -> None:
        """Remove all entries. id and version are kept."""
        self._content.clear()

    def is_empty(self) -> bool:
        return not self._content

    def contains_value(self, value: Any) -> bool:
        return value in self._content.values()

    def put(self, key: str, value: Any) -> Any:
        """Store value under key and return the previous value, or None."""
        previous = self._content.get(key)
        self._content[key] = value
        return previous

    def remove(self, key: str) -> Any:
        """Remove key and return its value, or None when it was absent."""
        return self._content.pop(key, None)

    def for_each(self, action: Callable[[str, Any], object]) -> None:
        """Call action(key, value) for every entry in insertion order."""
        for key, value in self._content.items():
            action(key, value)

    # --- typed accessors ---

    def get_str(self, key: str, default: str | None = None) -> str | None:
        return self._get_typed(key, (str,), default)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        return self._get_typed(key, (int,), default, allow_bool=False)

    def get_float(self, key: str, default: float | None = None) -> float | None:
        value = self._get_typed(key, (float, int), default, allow_bool=False)
        return float(value) if isinstance(value, int) else value

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        return self._get_typed(key, (bool,), default)

    def _get_typed(
        self,
        key: str,
        expected: tuple[type, ...],
        default: Any,
        *,
        allow_bool: bool = True,
    ) -> Any:
        # Missing keys and stored None both yield the default.
        value = self._content.get(key)
        if value is None:
            return default
        if not isinstance(value, expected) or (not allow_bool and isinstance(value, bool)):
            names = "/".join(t.__name__ for t in expected)
            raise TypeError(f"Value for {key!r} is {type(value).__name__}, expected {names}")
        return value

    def transform(self, fn: Callable[["MapDocument"], T]) -> T:
        return fn(self)

    # --- equality ---

    # Only the content entries take part; id and version are ignored on purpose.
    # Keep __eq__ and __hash__ in sync when touching either.
    def __eq__(self, other: object) -> bool:
        if isinstance(other, MapDocument):
            return self._content == other._content
        if isinstance(other, Mapping):
            return self._content == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(_freeze(self._content))

    # --- JSON ---

    def to_json(self) -> str:
        """Render id, version and content as one JSON object."""
        envelope = {"id": self._id, "version": self._version, "content": self._content}
        codec = self.codec
        try:
            return codec.encode(envelope)
        except (TypeError, ValueError, RecursionError) as e:
            logger.debug("Rendering document %s failed: %s", self._id, e)
            raise SerializationFailure("Cannot render document to JSON") from e

    @classmethod
    def from_json(cls, text: str | bytes, *, codec: JsonCodec | None = None) -> "MapDocument":
        """Rebuild a document from the output of to_json()."""
        reader = codec if codec is not None else cls._default_codec()
        try:
            data = reader.decode(text)
        except (TypeError, ValueError) as e:
            logger.debug("Decoding document JSON failed: %s", e)
            raise ParsingFailure("Cannot read document from JSON") from e

        if not isinstance(data, dict) or not isinstance(data.get("content"), dict):
            raise ParsingFailure("Document JSON must be an object with a 'content' object")
        doc_id = data.get("id")
        version = data.get("version")
        if doc_id is not None and not isinstance(doc_id, str):
            raise ParsingFailure("Document id must be a string")
        if version is not None and (not isinstance(version, int) or isinstance(version, bool)):
            raise ParsingFailure("Document version must be an integer")

        document = cls(data["content"], codec=codec)
        if doc_id is not None:
            document.id = doc_id
        if version is not None:
            document.version = version
        return document

    def __str__(self) -> str:
        doc_id = self.id if self.has_id() else "?"
        version = str(self.version) if self.has_version() else "?"
        return f"{type(self).__name__}@{doc_id}#{version} {self.to_json()}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, version={self._version!r}, content={self._content!r})"
