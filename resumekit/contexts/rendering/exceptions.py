"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional

from resumekit.contexts.templating.exceptions import ResumeKitError


class SerializationError(ResumeKitError):
    """
    Exception raised when a page tree cannot be turned into document bytes.

    Attributes:
        message: Error description
        template_id: Template being serialized
        original_error: The exception raised by the HTML or PDF stage
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.original_error = original_error

        parts = [message]
        if template_id:
            parts.append(f"\nTemplate: {template_id}")
        if original_error:
            parts.append(f"\nOriginal error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))


class ArtifactHandleError(ResumeKitError):
    """
    Exception raised when an artifact handle is misused (double release, unknown handle).

    Attributes:
        handle_id: Offending handle
        path: Backing file of the handle (if known)
    """

    def __init__(self, message: str, handle_id: str, path: Optional[Path] = None):
        self.handle_id = handle_id
        self.path = path
        super().__init__(f"{message}: {handle_id}")


class PreviewClosedError(ResumeKitError):
    """Exception raised when a closed preview pipeline receives a request."""

    def __init__(self, consumer_id: str):
        self.consumer_id = consumer_id
        super().__init__(f"Preview pipeline '{consumer_id}' is closed")
