"""Domain exceptions."""


class EsdocError(Exception):
    """Base exception for esdoc."""

    pass


class IllegalState(EsdocError):
    """An optional document field was read before it was set."""

    pass


class SerializationFailure(EsdocError):
    """Document could not be rendered to JSON."""

    pass


class ParsingFailure(EsdocError):
    """JSON text could not be turned into a document."""

    pass
