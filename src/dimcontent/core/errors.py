"""
Structured error types for dimcontent.

Every failure raised by the dimension pipeline carries a category and a
structured context, so callers (a web layer, a CLI, a log aggregator) can
route and render errors without parsing messages.

Manifesto:
    - **Typed Error Hierarchy:** One error type per failure domain
    - **Rich Context:** Errors carry the resource key, id, locale and stage
    - **Error Chaining:** Preserve original exceptions via ``cause=``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────────┐
        │                      DimContentError                             │
        │          (category, context, cause, to_dict)                     │
        ├─────────────────────────────────────────────────────────────────┤
        │                                                                  │
        │  ContentError          MetadataError        RoutingError         │
        │  (CONTENT)             (METADATA)           (ROUTING)            │
        │       │                     │                    │               │
        │  ContentNotFound      TemplateNotFound     RouteGoneError        │
        │  DataMappingError     InvalidOptionError   MissingRequestContext │
        │                                                                  │
        │  ResolutionError       ConfigError                               │
        │  (RESOLUTION)          (CONFIG)                                  │
        │       │                                                          │
        │  ResourceLoaderNotFound                                          │
        │  SmartResolverNotFound                                           │
        │  InvalidBlockTypeError                                           │
        └─────────────────────────────────────────────────────────────────┘

Examples:
    >>> error = ContentNotFoundError("No dimension content found")
    >>> error.with_context(resource_key="pages", resource_id="123", locale="en")
    ContentNotFoundError('No dimension content found', category=CONTENT)
    >>> error.context.locale
    'en'

Guardrails:
    ❌ DON'T: Raise bare RuntimeError from pipeline stages
    ✅ DO: Raise the matching DimContentError subclass

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, dimcontent
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sqlalchemy.exc import SQLAlchemyError


class ErrorCategory(str, Enum):
    """Error categories used for classification and routing."""

    CONTENT = "CONTENT"           # Dimension content lookup, mapping
    METADATA = "METADATA"         # Form/template metadata
    RESOLUTION = "RESOLUTION"     # Resource loading, resolver wiring
    ROUTING = "ROUTING"           # Routes, resource locators, url generation
    CONFIG = "CONFIG"             # Missing or invalid settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only fields that are set end up in :meth:`to_dict`, so the logged
    payload stays small.

    Attributes:
        resource_key: Resource key of the content-rich entity (e.g. ``pages``)
        resource_id: Identifier of the entity
        locale: Requested locale
        stage: Requested stage (``draft`` / ``live``)
        loader_key: Resource loader key involved in the failure
        template_key: Template key involved in the failure
        metadata: Additional key-value pairs
    """

    resource_key: str | None = None
    resource_id: str | None = None
    locale: str | None = None
    stage: str | None = None
    loader_key: str | None = None
    template_key: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["resource_key", "resource_id", "locale", "stage",
                    "loader_key", "template_key"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class DimContentError(Exception):
    """
    Base exception for all dimcontent errors.

    Subclasses set ``default_category``; instances may override it.

    Examples:
        >>> error = DimContentError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'DimContentError'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DimContentError:
        """
        Add context to this error (fluent API).

        Usage:
            raise TemplateNotFoundError("Unknown template").with_context(
                template_key="homepage",
                locale="en",
            )
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONTENT ERRORS
# =============================================================================


class ContentError(DimContentError):
    """Dimension content could not be read or written."""

    default_category = ErrorCategory.CONTENT


class ContentNotFoundError(ContentError):
    """No dimension content matches the requested dimension attributes."""

    pass


class DataMappingError(ContentError):
    """Incoming data could not be mapped onto a dimension content."""

    pass


# =============================================================================
# METADATA ERRORS
# =============================================================================


class MetadataError(DimContentError):
    """Form metadata is missing or malformed."""

    default_category = ErrorCategory.METADATA


class TemplateNotFoundError(MetadataError):
    """A template key is not defined for the template type."""

    def __init__(
        self,
        template_key: str,
        available: list[str] | None = None,
        **kwargs: Any,
    ):
        available = available or []
        message = (
            f'Template with key "{template_key}" not found. '
            f"Available keys: {', '.join(available)}"
        )
        super().__init__(message, **kwargs)
        self.template_key = template_key
        self.available = available
        self.context.template_key = template_key


class InvalidOptionError(MetadataError):
    """A field option has a value incompatible with its type."""

    pass


# =============================================================================
# RESOLUTION ERRORS
# =============================================================================


class ResolutionError(DimContentError):
    """Content resolution failed."""

    default_category = ErrorCategory.RESOLUTION


class ResourceLoaderNotFoundError(ResolutionError):
    """No resource loader is registered for a loader key."""

    def __init__(self, loader_key: str, **kwargs: Any):
        super().__init__(f'ResourceLoader with key "{loader_key}" not found', **kwargs)
        self.context.loader_key = loader_key


class SmartResolverNotFoundError(ResolutionError):
    """No smart resolver is registered for a loader key."""

    def __init__(self, loader_key: str, **kwargs: Any):
        super().__init__(f'SmartResolver with key "{loader_key}" not found', **kwargs)
        self.context.loader_key = loader_key


class InvalidBlockTypeError(ResolutionError):
    """A block references a type that its field does not define (debug mode only)."""

    pass


# =============================================================================
# ROUTING ERRORS
# =============================================================================


class RoutingError(DimContentError):
    """Route lookup or url generation failed."""

    default_category = ErrorCategory.ROUTING


class RouteGoneError(RoutingError):
    """A history route points to a resource that no longer has a route."""

    pass


class MissingRequestContextError(RoutingError):
    """A request context parameter (e.g. the site) is required but not set."""

    def __init__(self, parameter: str, **kwargs: Any):
        super().__init__(
            f'Missing request context parameter "{parameter}"', **kwargs
        )
        self.parameter = parameter


# =============================================================================
# CONFIG ERRORS
# =============================================================================


class ConfigError(DimContentError):
    """Settings are missing or invalid."""

    default_category = ErrorCategory.CONFIG


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, DimContentError):
        return error.category
    # Map common exceptions to categories
    if isinstance(error, SQLAlchemyError):
        return ErrorCategory.ROUTING
    if isinstance(error, OSError):
        return ErrorCategory.CONFIG
    if isinstance(error, ValueError):
        return ErrorCategory.CONTENT
    if isinstance(error, (KeyError, AttributeError)):
        return ErrorCategory.CONFIG
    return ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "DimContentError",
    "ContentError",
    "ContentNotFoundError",
    "DataMappingError",
    "MetadataError",
    "TemplateNotFoundError",
    "InvalidOptionError",
    "ResolutionError",
    "ResourceLoaderNotFoundError",
    "SmartResolverNotFoundError",
    "InvalidBlockTypeError",
    "RoutingError",
    "RouteGoneError",
    "MissingRequestContextError",
    "ConfigError",
    "categorize_error",
]
