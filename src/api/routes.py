# src/api/routes.py
from __future__ import annotations

from fastapi import FastAPI, Query
from pydantic import BaseModel

from instructions.composer import generate_instructions
from instructions.hints import known_toolsets
from runtime.settings import load_settings, resolve_toolsets

app = FastAPI(title="Toolset Instructions API")


class InstructionsResponse(BaseModel):
    toolsets: list[str]
    instructions: str


class ToolsetsResponse(BaseModel):
    toolsets: list[str]


@app.get("/instructions", response_model=InstructionsResponse)
def instructions_endpoint(
    toolsets: list[str] | None = Query(default=None),
) -> InstructionsResponse:
    """Return the instructions a connecting client receives at initialization."""
    if toolsets is not None:
        enabled = resolve_toolsets(",".join(toolsets))
    else:
        enabled = list(load_settings().enabled_toolsets)
    return InstructionsResponse(
        toolsets=enabled,
        instructions=generate_instructions(enabled),
    )


@app.get("/toolsets", response_model=ToolsetsResponse)
def toolsets_endpoint() -> ToolsetsResponse:
    return ToolsetsResponse(toolsets=known_toolsets())
