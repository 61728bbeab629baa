from __future__ import annotations

from typing import List

from ..ir import ComponentDefinition, ComponentRequest, ParsedIntent, VariantDefinition


MAX_VARIANTS = 3


class VariantSelector:
    def __init__(self, max_variants: int = MAX_VARIANTS) -> None:
        self.max_variants = max_variants

    def select(
        self,
        definition: ComponentDefinition,
        request: ComponentRequest | None = None,
        intent: ParsedIntent | None = None,
    ) -> List[VariantDefinition]:
        # Catalog order, capped; request and intent do not influence the choice yet.
        return list(definition.variants[: self.max_variants])
