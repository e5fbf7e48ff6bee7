"""Exception hierarchy shared by the content engine and the HTTP layer.

Every failure the engine can produce maps to exactly one class below. Each
class records the HTTP status the server answers with, so the Flask error
handler needs no lookup table of its own.
"""

from __future__ import annotations

from http import HTTPStatus


class SiteError(Exception):
    """Base class for every error raised while serving content."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    public_message: str = "Internal server error."


class ConfigurationError(SiteError, ValueError):
    """Raised when the configuration file is missing, unreadable, or invalid."""

    public_message = "Configuration error."


class ContentRootUnreadable(SiteError):
    """Raised when the content root directory cannot be listed."""

    status_code = HTTPStatus.NOT_IMPLEMENTED
    public_message = "Could not load menu."


class NoSectionsConfigured(SiteError):
    """Raised when the content root holds no section directories."""

    status_code = HTTPStatus.NOT_IMPLEMENTED
    public_message = "Could not load menu."


class SectionUnreadable(SiteError):
    """Raised when a section directory cannot be listed."""

    status_code = HTTPStatus.NOT_FOUND
    public_message = "Page not found."


class PageOutOfRange(SiteError):
    """Raised when the requested listing page starts past the last document."""

    status_code = HTTPStatus.NOT_FOUND
    public_message = "Page not found."


class DocumentNotFound(SiteError):
    """Raised when a requested document has no readable backing file."""

    status_code = HTTPStatus.NOT_FOUND
    public_message = "Page not found."


class RenderError(SiteError):
    """Raised when the page template is missing or fails to render."""

    status_code = HTTPStatus.NOT_IMPLEMENTED
    public_message = "Could not render page."


__all__ = [
    "ConfigurationError",
    "ContentRootUnreadable",
    "DocumentNotFound",
    "NoSectionsConfigured",
    "PageOutOfRange",
    "RenderError",
    "SectionUnreadable",
    "SiteError",
]
