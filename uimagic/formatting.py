"""Markdown rendering shared by the CLI and the MCP tool server."""

from __future__ import annotations

from typing import List, Sequence

from .ir import ComponentDefinition, ComponentResponse

CODE_FENCE_LANG = {
    "react": "tsx",
    "vue": "vue",
    "svelte": "svelte",
}


def format_component_response(response: ComponentResponse) -> str:
    meta = response.metadata
    lines: List[str] = [
        f"# Generated {meta.component_kind} component",
        "",
        f"**Framework**: {meta.framework} | **Styling**: {meta.styling}",
        f"**Features**: {', '.join(meta.features) or 'standard'}",
        "",
        f"## {len(response.variants)} variants",
        "",
    ]
    lang = CODE_FENCE_LANG.get(meta.framework, "")
    for i, variant in enumerate(response.variants, start=1):
        lines += [f"### {i}. {variant.name}", f"*{variant.description}*", "", f"```{lang}", variant.code, "```", ""]
        if variant.styles:
            lines += ["```css", variant.styles.strip(), "```", ""]

    lines += ["## Integration", ""]
    lines += [f"{i}. {step}" for i, step in enumerate(response.integration_instructions, start=1)]
    return "\n".join(lines) + "\n"


def format_component_list(components: Sequence[ComponentDefinition]) -> str:
    lines: List[str] = ["# Available components", ""]
    if not components:
        lines.append("No components found.")
        return "\n".join(lines) + "\n"

    categories: List[str] = []
    for c in components:
        if c.category not in categories:
            categories.append(c.category)

    for category in categories:
        lines += [f"## {category.capitalize()} components", ""]
        for c in components:
            if c.category != category:
                continue
            lines += [
                f"### {c.name}",
                f"*{c.description}*",
                "",
                f"**Keywords**: {', '.join(c.keywords)}",
                f"**Frameworks**: {', '.join(c.frameworks)}",
                f"**Variants**: {', '.join(v.name for v in c.variants)}",
                "",
            ]
    return "\n".join(lines) + "\n"
