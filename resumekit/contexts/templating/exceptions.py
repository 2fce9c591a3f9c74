"""Custom exceptions for the templating context with template references."""

from typing import Iterable, Optional


class ResumeKitError(Exception):
    """Base class for every error raised by resumekit."""


class UnknownTemplateError(ResumeKitError, KeyError):
    """
    Exception raised when a template id is not registered.

    Attributes:
        template_id: The id that failed to resolve
        known_ids: Registered ids at the time of the lookup
    """

    def __init__(self, template_id: str, known_ids: Optional[Iterable[str]] = None):
        self.template_id = template_id
        self.known_ids = sorted(known_ids or [])

        parts = [f"Unknown template: '{template_id}'"]
        if self.known_ids:
            parts.append(f"Registered templates: {', '.join(self.known_ids)}")
        self.message = "\n".join(parts)

        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InvalidColorError(ResumeKitError, ValueError):
    """
    Exception raised when an accent color is not a usable hex color.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Invalid color {value!r}: expected a hex color such as '#2563eb', '2563eb' or '#26e'"
        )


class TemplateConfigError(ResumeKitError):
    """
    Exception raised when the template catalog or a layout's options are invalid.

    Attributes:
        message: Error description
        template_id: Catalog entry that carries the problem (if known)
    """

    def __init__(self, message: str, template_id: Optional[str] = None):
        self.message = message
        self.template_id = template_id

        parts = [message]
        if template_id:
            parts.append(f"Template: {template_id}")

        super().__init__("\n".join(parts))


class TemplateRenderError(ResumeKitError):
    """
    Exception raised when a layout fails while building its page tree.

    Attributes:
        message: Error description
        template_id: Template whose layout raised
        layout_name: Layout class that raised
        original_error: The exception raised by the layout
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        layout_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.layout_name = layout_name
        self.original_error = original_error

        parts = [message]

        if template_id:
            parts.append(f"\nTemplate: {template_id}")
        if layout_name:
            parts.append(f"Layout: {layout_name}")

        if original_error:
            parts.append(f"\nOriginal error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
