from __future__ import annotations

from typing import Sequence

from ..ir import ComponentDefinition, Framework, StylingSystem, VariantDefinition
from .constraints import apply_constraints
from .templates import TemplateProvider


class CodeGenerator:
    def __init__(self, templates: TemplateProvider | None = None) -> None:
        self.templates = templates or TemplateProvider()

    async def generate_code(
        self,
        definition: ComponentDefinition,
        variant: VariantDefinition,
        framework: Framework,
        styling: StylingSystem,
        constraints: Sequence[str],
    ) -> str:
        code = self.templates.get_template(definition.kind, framework)
        return apply_constraints(code, definition.kind, framework, constraints)

    async def generate_styles(
        self,
        definition: ComponentDefinition,
        variant: VariantDefinition,
        styling: StylingSystem,
        constraints: Sequence[str],
    ) -> str | None:
        # Utility classes and CSS-in-JS keep their styles inside the component code
        if styling != "css":
            return None
        return self.templates.get_stylesheet(definition.kind)
