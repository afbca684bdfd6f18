"""Termchart error hierarchy."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCategory(StrEnum):
    """Category of error for classification and handling."""

    DATASET = "dataset"
    COLOR = "color"
    OPTIONS = "options"
    DOMAIN = "domain"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class ChartError(Exception):
    """Base error for all chart rendering exceptions."""

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.details: dict[str, Any] = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, category={self.category!r})"


class InvalidDatasetError(ChartError):
    """Dataset is empty, or one of its items is malformed."""

    def __init__(self, message: str, *, index: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, category=ErrorCategory.DATASET, **kwargs)
        self.index = index


class InvalidColorError(ChartError):
    """Color name is not part of the 8-color palette."""

    def __init__(self, color: object, *, role: str = "color") -> None:
        super().__init__(f"Invalid {role}: {color!r}", category=ErrorCategory.COLOR)
        self.color = color


class InvalidOptionsError(ChartError):
    """Options record has an unknown field, a mistyped value, or does not fit the data."""

    def __init__(self, message: str, *, option: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, category=ErrorCategory.OPTIONS, **kwargs)
        self.option = option


class EmptyDomainError(ChartError):
    """A value domain was requested for an empty sequence."""

    def __init__(self, message: str = "Cannot compute a domain of zero values") -> None:
        super().__init__(message, category=ErrorCategory.DOMAIN)


class ConfigurationError(ChartError):
    """Invalid or unreadable configuration or input file."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.CONFIGURATION)
