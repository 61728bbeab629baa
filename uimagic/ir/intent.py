from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field


Framework = Literal["react", "vue", "svelte"]
StylingSystem = Literal["tailwind", "css", "styled-components", "emotion"]
ComponentKind = Literal[
    "button",
    "input",
    "card",
    "modal",
    "alert",
    "pricing-table",
    "contact-form",
    "navigation",
    "hero",
    "data-table",
]


class ParsedIntent(BaseModel):
    model_config = ConfigDict(frozen=True)

    component_kind: ComponentKind
    framework: Framework
    styling: StylingSystem
    features: Tuple[str, ...] = ()
    constraints: Tuple[str, ...] = ()
    confidence: float = Field(ge=0.0, le=1.0, default=0.5)
