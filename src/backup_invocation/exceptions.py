"""Exceptions raised while compiling invocations or reading tool output."""


class InvocationError(ValueError):
    """Base class for errors surfaced to the reconcile loop."""

    pass


class UnknownStorageProviderError(InvocationError):
    """Raised when a job has no storage provider, or more than one."""

    pass


class MetadataFormatError(InvocationError):
    """Raised when dump metadata is missing, unreadable, or malformed."""

    pass
