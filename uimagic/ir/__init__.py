from .intent import ComponentKind, Framework, ParsedIntent, StylingSystem
from .component import (
    Category,
    Complexity,
    ComponentDefinition,
    ComponentMetadata,
    ComponentRequest,
    ComponentResponse,
    ComponentVariant,
    PropSpec,
    VariantDefinition,
)

__all__ = [
    "ComponentKind",
    "Framework",
    "StylingSystem",
    "ParsedIntent",
    "Category",
    "Complexity",
    "PropSpec",
    "VariantDefinition",
    "ComponentDefinition",
    "ComponentRequest",
    "ComponentVariant",
    "ComponentMetadata",
    "ComponentResponse",
]
