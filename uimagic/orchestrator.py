from __future__ import annotations

import logging
from typing import List, Optional

from .catalog import ComponentCatalog
from .config import AppConfig
from .errors import ComponentNotFound
from .generation import CodeGenerator, TemplateProvider, VariantSelector
from .ir import (
    Category,
    ComponentDefinition,
    ComponentMetadata,
    ComponentRequest,
    ComponentResponse,
    ComponentVariant,
    Framework,
    ParsedIntent,
    StylingSystem,
)
from .parser import IntentParser
from .tracing import GenerationTrace, TraceLogger

logger = logging.getLogger(__name__)

FRAMEWORK_LABELS = {
    "react": "React",
    "vue": "Vue",
    "svelte": "Svelte",
}

STYLING_SETUP = {
    "css": ["Import the generated stylesheet next to the component"],
    "styled-components": ["Install styled-components: npm install styled-components"],
    "emotion": ["Install Emotion: npm install @emotion/react @emotion/styled"],
}


class ComponentGenerator:
    """Runs parse -> catalog lookup -> variant selection -> code generation.

    The catalog and template provider are read-only once built and can be
    shared between generators; every call works on fresh values.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        catalog: ComponentCatalog | None = None,
        templates: TemplateProvider | None = None,
        tracer: TraceLogger | None = None,
    ) -> None:
        self.config = config or AppConfig()
        gen = self.config.generation
        self.parser = IntentParser(default_framework=gen.default_framework, default_styling=gen.default_styling)
        self.catalog = catalog or ComponentCatalog()
        self.code_generator = CodeGenerator(templates or TemplateProvider(gen.templates_dir))
        self.selector = VariantSelector()
        self.tracer = tracer or TraceLogger(enabled=self.config.tracing.enabled, directory=self.config.tracing.dir)

    async def generate_component(self, request: ComponentRequest) -> ComponentResponse:
        intent = self.parser.parse(request.description)

        definition = await self.catalog.find_component(intent.component_kind)
        if definition is None:
            raise ComponentNotFound(intent.component_kind)

        variants = await self._generate_variants(definition, request, intent)
        metadata = ComponentMetadata(
            component_kind=intent.component_kind,
            framework=request.framework,
            styling=request.styling,
            features=list(intent.features),
            accessibility=True,
            responsive="responsive" in intent.features,
        )
        response = ComponentResponse(
            variants=variants,
            metadata=metadata,
            integration_instructions=self._integration_instructions(variants, request),
        )
        logger.info(
            "Generated %d %s variant(s) for %s/%s",
            len(variants),
            intent.component_kind,
            request.framework,
            request.styling,
        )
        self._trace(request, intent, response)
        return response

    async def quick_generate(
        self,
        description: str,
        framework: Optional[Framework] = None,
        styling: Optional[StylingSystem] = None,
    ) -> ComponentResponse:
        intent = self.parser.parse(description)
        return await self.generate_component(
            ComponentRequest(
                description=description,
                framework=framework or intent.framework,
                styling=styling or intent.styling,
                features=list(intent.features),
            )
        )

    def parse(self, description: str) -> ParsedIntent:
        return self.parser.parse(description)

    def get_all_components(self) -> List[ComponentDefinition]:
        return self.catalog.get_all_components()

    def list_components(self, category: Optional[Category] = None) -> List[ComponentDefinition]:
        if category is None:
            return self.catalog.get_all_components()
        return self.catalog.get_components_by_category(category)

    def search_components(self, query: str) -> List[ComponentDefinition]:
        return self.catalog.search_components(query)

    async def _generate_variants(
        self,
        definition: ComponentDefinition,
        request: ComponentRequest,
        intent: ParsedIntent,
    ) -> List[ComponentVariant]:
        variants: List[ComponentVariant] = []
        for variant_def in self.selector.select(definition, request, intent):
            code = await self.code_generator.generate_code(
                definition, variant_def, request.framework, request.styling, intent.constraints
            )
            styles = await self.code_generator.generate_styles(
                definition, variant_def, request.styling, intent.constraints
            )
            variants.append(
                ComponentVariant(
                    name=variant_def.name,
                    description=variant_def.description,
                    code=code,
                    styles=styles,
                    dependencies=list(definition.dependencies),
                    props=dict(definition.props),
                )
            )
        return variants

    def _integration_instructions(self, variants: List[ComponentVariant], request: ComponentRequest) -> List[str]:
        instructions: List[str] = []
        if variants and variants[0].dependencies:
            instructions.append(f"Install dependencies: npm install {' '.join(variants[0].dependencies)}")

        if request.styling == "tailwind":
            instructions.append("Make sure Tailwind CSS is configured in your project")
            if request.framework == "react":
                instructions.append("Add the cn() utility at @/utils/cn if not already present")
        else:
            instructions.extend(STYLING_SETUP.get(request.styling, []))

        label = FRAMEWORK_LABELS[request.framework]
        instructions.append(f"Import and use the component in your {label} application")
        instructions.append("Customize props as needed for your use case")
        return instructions

    def _trace(self, request: ComponentRequest, intent: ParsedIntent, response: ComponentResponse) -> None:
        try:
            self.tracer.save(
                GenerationTrace(
                    description=request.description,
                    intent=intent.model_dump(),
                    component_kind=intent.component_kind,
                    framework=request.framework,
                    styling=request.styling,
                    variants=[v.name for v in response.variants],
                    meta=response.metadata.model_dump(mode="json"),
                )
            )
        except OSError as exc:
            logger.warning("Could not write generation trace: %s", exc)
