from typing import Optional


class AppException(Exception):
    """Base application exception."""

    pass


class SerializationError(AppException):
    """A resource could not be encoded for the Kubernetes API."""

    pass


class SubmissionError(AppException):
    """The Kubernetes control plane rejected a request.

    ``reason`` is the machine-readable reason from the API Status body
    (e.g. ``AlreadyExists``, ``Invalid``, ``Forbidden``) when one was sent,
    otherwise the HTTP reason phrase.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status = status
        self.reason = reason
        self.body = body


class ResourceConflictError(SubmissionError):
    """A resource with the same name already exists."""

    pass
