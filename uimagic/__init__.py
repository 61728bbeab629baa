"""uimagic: turn short natural-language descriptions into UI component code."""

from .catalog import ComponentCatalog
from .config import AppConfig, load_config
from .errors import ComponentNotFound, GenerationNotImplemented, UIMagicError
from .generation import TemplateProvider
from .ir import ComponentRequest, ComponentResponse, ParsedIntent
from .orchestrator import ComponentGenerator
from .parser import IntentParser

__all__ = [
    "AppConfig",
    "ComponentCatalog",
    "ComponentGenerator",
    "ComponentNotFound",
    "ComponentRequest",
    "ComponentResponse",
    "GenerationNotImplemented",
    "IntentParser",
    "ParsedIntent",
    "TemplateProvider",
    "UIMagicError",
    "load_config",
]
