from __future__ import annotations

import asyncio
import json
import logging
from typing import Optional, get_args

import typer
import uvicorn

from .config import AppConfig, load_config
from .errors import UIMagicError
from .formatting import format_component_list, format_component_response
from .ir import Category
from .orchestrator import ComponentGenerator
from .server.mcp_server import build_server


app = typer.Typer(help="uimagic: natural language to UI component code", no_args_is_help=True)

DEMO_DESCRIPTIONS = [
    "create a blue button",
    "create a red button with loading state",
    "create a large green button",
    "create a vue input with validation",
    "create a responsive modal dialog",
    "create a pricing table with 3 tiers",
]

_state: dict = {}


def _config() -> AppConfig:
    return _state.get("config") or load_config()


def _fail(exc: UIMagicError) -> None:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(config_path: Optional[str] = typer.Option(None, "--config", help="Path to a YAML config file")):
    try:
        cfg = load_config(config_path)
    except UIMagicError as exc:
        _fail(exc)
    _state["config"] = cfg
    logging.basicConfig(level=cfg.logging.level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@app.command()
def generate(
    description: str,
    framework: Optional[str] = typer.Option(None, help="react, vue or svelte (auto-detected when omitted)"),
    styling: Optional[str] = typer.Option(None, help="tailwind, css, styled-components or emotion"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response as JSON"),
):
    """Generate component variants from a description."""
    gen = ComponentGenerator(_config())
    try:
        result = asyncio.run(gen.quick_generate(description, framework=framework, styling=styling))
    except UIMagicError as exc:
        _fail(exc)
    except ValueError as exc:
        # pydantic rejects unknown framework/styling names
        raise typer.BadParameter(str(exc)) from exc
    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
    else:
        typer.echo(format_component_response(result))


@app.command()
def parse(description: str):
    """Show the parsed intent and auxiliary hints for a description."""
    gen = ComponentGenerator(_config())
    payload = {
        "intent": gen.parse(description).model_dump(),
        "variant_hint": gen.parser.extract_variant_hint(description),
        "quantity": gen.parser.extract_quantity(description),
        "comparison": gen.parser.extract_comparison(description),
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command("list-components")
def list_components(category: Optional[str] = typer.Option(None, help="core, composite or layout")):
    """List catalog components, optionally filtered by category."""
    if category is not None and category not in get_args(Category):
        raise typer.BadParameter(f"must be one of {', '.join(get_args(Category))}", param_hint="--category")
    gen = ComponentGenerator(_config())
    typer.echo(format_component_list(gen.list_components(category)))


@app.command()
def search(query: str):
    """Search components by name, keyword or description."""
    gen = ComponentGenerator(_config())
    typer.echo(format_component_list(gen.search_components(query)))


@app.command()
def demo():
    """Run a fixed list of sample descriptions and print a summary of each."""
    gen = ComponentGenerator(_config())
    for description in DEMO_DESCRIPTIONS:
        typer.echo(f'\n"{description}"')
        typer.echo("-" * 50)
        try:
            result = asyncio.run(gen.quick_generate(description))
        except UIMagicError as exc:
            typer.echo(f"  error: {exc}")
            continue
        meta = result.metadata
        typer.echo(f"  {len(result.variants)} variants: {', '.join(v.name for v in result.variants)}")
        typer.echo(f"  type={meta.component_kind} framework={meta.framework} styling={meta.styling}")
        typer.echo(f"  features={', '.join(meta.features) or 'none'} responsive={meta.responsive}")
        for step in result.integration_instructions:
            typer.echo(f"  - {step}")


@app.command()
def serve(host: str | None = None, port: int | None = None):
    """Serve the HTTP API."""
    cfg = _config()
    if host:
        cfg.server.host = host
    if port:
        cfg.server.port = port
    uvicorn.run("uimagic.server.app:app", host=cfg.server.host, port=cfg.server.port, reload=False)


@app.command()
def mcp(transport: Optional[str] = typer.Option(None, help="stdio, sse or streamable-http")):
    """Run the MCP tool server."""
    cfg = _config()
    server = build_server(ComponentGenerator(cfg), name=cfg.mcp.name)
    server.run(transport=transport or cfg.mcp.transport)


if __name__ == "__main__":
    app()
