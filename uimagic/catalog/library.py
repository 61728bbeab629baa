from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..ir import Category, ComponentDefinition
from .definitions import DEFAULT_COMPONENTS


class ComponentCatalog:
    """Read-only, in-memory map of component kind to definition.

    Each catalog holds its own deep copies, so nothing a caller does to one
    catalog's definitions reaches ``DEFAULT_COMPONENTS`` or another catalog.
    """

    def __init__(self, definitions: Iterable[ComponentDefinition] | None = None) -> None:
        self._components: Dict[str, ComponentDefinition] = {}
        for definition in DEFAULT_COMPONENTS if definitions is None else definitions:
            self._components[definition.kind] = definition.model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, kind: object) -> bool:
        return kind in self._components

    def kinds(self) -> List[str]:
        return list(self._components)

    def get(self, kind: str) -> Optional[ComponentDefinition]:
        return self._components.get(kind)

    async def find_component(self, kind: str) -> Optional[ComponentDefinition]:
        return self.get(kind)

    def get_all_components(self) -> List[ComponentDefinition]:
        return list(self._components.values())

    def get_components_by_category(self, category: Category) -> List[ComponentDefinition]:
        return [c for c in self._components.values() if c.category == category]

    def search_components(self, query: str) -> List[ComponentDefinition]:
        """Match ``query`` against name, then keywords, then description."""
        q = query.lower()
        results: List[ComponentDefinition] = []
        for component in self._components.values():
            if q in component.name.lower():
                results.append(component)
            elif any(q in keyword for keyword in component.keywords):
                results.append(component)
            elif q in component.description.lower():
                results.append(component)
        return results
