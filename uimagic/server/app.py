from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from ..config import load_config
from ..errors import ComponentNotFound, GenerationNotImplemented
from ..ir import Category, Framework, StylingSystem
from ..orchestrator import ComponentGenerator


class GenerateReq(BaseModel):
    description: str
    framework: Optional[Framework] = None
    styling: Optional[StylingSystem] = None


class ParseReq(BaseModel):
    description: str


cfg = load_config()
gen = ComponentGenerator(cfg)
app = FastAPI(title="uimagic")


@app.get("/status")
def status():
    return {
        "components": gen.catalog.kinds(),
        "generation": cfg.generation.model_dump(),
    }


@app.get("/components")
def components(category: Optional[Category] = None):
    return [c.model_dump() for c in gen.list_components(category)]


@app.post("/parse")
def parse(req: ParseReq):
    intent = gen.parse(req.description)
    return {
        "intent": intent.model_dump(),
        "variant_hint": gen.parser.extract_variant_hint(req.description),
        "quantity": gen.parser.extract_quantity(req.description),
        "comparison": gen.parser.extract_comparison(req.description),
    }


@app.post("/generate")
async def generate(req: GenerateReq):
    try:
        response = await gen.quick_generate(req.description, framework=req.framework, styling=req.styling)
    except ComponentNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except GenerationNotImplemented as exc:
        raise HTTPException(status_code=501, detail=str(exc)) from exc
    return response.model_dump(mode="json")
