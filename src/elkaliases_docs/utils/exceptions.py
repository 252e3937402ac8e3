"""Custom exception classes for the ElkAliases documentation site.

This module provides a hierarchy of exceptions for rendering, page lookup
and site builds.
"""

from typing import Any, Dict, Optional


class DocsSiteError(Exception):
    """Base exception for all documentation site errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(DocsSiteError):
    """Raised when there's a configuration issue."""
    pass


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(self, config_key: str):
        super().__init__(
            f"Missing required configuration: {config_key}",
            {"config_key": config_key}
        )


# =============================================================================
# Navigation / Page Errors
# =============================================================================

class NavigationError(DocsSiteError):
    """Raised when a navigation tree is malformed."""

    def __init__(self, message: str, item_id: Optional[str] = None):
        self.item_id = item_id
        super().__init__(message, {"item_id": item_id} if item_id else None)


class PageNotFoundError(DocsSiteError):
    """Raised when no documentation page is registered for a path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No page registered for {path}", {"path": path})


# =============================================================================
# Build Errors
# =============================================================================

class BuildError(DocsSiteError):
    """Raised when writing the static site fails."""

    def __init__(self, message: str, output_path: Optional[str] = None):
        self.output_path = output_path
        super().__init__(
            message, {"output_path": output_path} if output_path else None
        )
