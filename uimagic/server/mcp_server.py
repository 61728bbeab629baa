"""MCP tool server exposing ``generate-component`` and ``list-components``.

Built with FastMCP from the official modelcontextprotocol Python SDK. Run
with ``uimagic mcp`` (stdio transport by default).
"""

from __future__ import annotations

from typing import Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from ..errors import UIMagicError
from ..formatting import format_component_list, format_component_response
from ..ir import Category, Framework
from ..orchestrator import ComponentGenerator

ToolStyling = Literal["tailwind", "css", "styled-components"]


async def generate_component_text(
    generator: ComponentGenerator,
    description: str,
    framework: Optional[Framework] = None,
    styling: Optional[ToolStyling] = None,
) -> str:
    try:
        response = await generator.quick_generate(description, framework=framework, styling=styling)
    except UIMagicError as exc:
        raise ToolError(f"Error generating component: {exc}") from exc
    return format_component_response(response)


def list_components_text(generator: ComponentGenerator, category: Optional[Category] = None) -> str:
    return format_component_list(generator.list_components(category))


def build_server(generator: ComponentGenerator, name: str = "uimagic") -> FastMCP:
    mcp = FastMCP(name)

    @mcp.tool(name="generate-component")
    async def generate_component(
        description: str,
        framework: Optional[Framework] = None,
        styling: Optional[ToolStyling] = None,
    ) -> str:
        """Generate UI component code from a natural language description.

        framework and styling are auto-detected from the description when omitted.
        """
        return await generate_component_text(generator, description, framework, styling)

    @mcp.tool(name="list-components")
    def list_components(category: Optional[Category] = None) -> str:
        """List the available component types and their variants, optionally filtered by category."""
        return list_components_text(generator, category)

    return mcp
