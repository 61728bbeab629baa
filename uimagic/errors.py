"""Typed exception hierarchy for uimagic."""

from __future__ import annotations


class UIMagicError(Exception):
    """Base exception for all uimagic errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class ComponentNotFound(UIMagicError):
    """The parsed component kind has no entry in the catalog."""

    def __init__(self, kind: str, **kwargs) -> None:
        super().__init__(f'Component type "{kind}" not found', **kwargs)
        self.kind = kind


class GenerationNotImplemented(UIMagicError):
    """No template exists for a (component kind, framework) pair."""

    def __init__(self, kind: str, framework: str, **kwargs) -> None:
        super().__init__(f"Code generation not implemented for {kind} in {framework}", **kwargs)
        self.kind = kind
        self.framework = framework


class ConfigError(UIMagicError):
    """Configuration file is missing or invalid."""
