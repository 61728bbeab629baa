from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .intent import ComponentKind, Framework, StylingSystem


Category = Literal["core", "composite", "layout"]
Complexity = Literal["simple", "medium", "complex"]


class PropSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    required: bool = False
    default: Any = None
    description: Optional[str] = None


class VariantDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    features: Tuple[str, ...] = ()
    complexity: Complexity = "simple"


class ComponentDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ComponentKind
    name: str
    category: Category
    description: str
    keywords: Tuple[str, ...] = ()
    frameworks: Tuple[Framework, ...] = ()
    styling: Tuple[StylingSystem, ...] = ()
    variants: Tuple[VariantDefinition, ...] = ()
    props: Dict[str, PropSpec] = Field(default_factory=dict)
    dependencies: Tuple[str, ...] = ()
    imports: Tuple[str, ...] = ()


class ComponentRequest(BaseModel):
    description: str
    framework: Framework = "react"
    styling: StylingSystem = "tailwind"
    # Caller hints only; generation re-derives features and constraints from the description.
    features: Optional[List[str]] = None
    constraints: Optional[List[str]] = None


class ComponentVariant(BaseModel):
    name: str
    description: str
    code: str
    styles: Optional[str] = None
    dependencies: List[str] = Field(default_factory=list)
    props: Dict[str, PropSpec] = Field(default_factory=dict)


class ComponentMetadata(BaseModel):
    component_kind: ComponentKind
    framework: Framework
    styling: StylingSystem
    features: List[str] = Field(default_factory=list)
    accessibility: bool = True
    responsive: bool = False
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ComponentResponse(BaseModel):
    variants: List[ComponentVariant] = Field(default_factory=list)
    metadata: ComponentMetadata
    integration_instructions: List[str] = Field(default_factory=list)
