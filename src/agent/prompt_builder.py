from __future__ import annotations

from typing import Sequence

SYSTEM_PROMPT = (
    "You are a GitHub assistant working through the tools of the GitHub MCP Server.\n\n"
    "Runtime tool protocol:\n"
    "1) Only use tools exposed by the enabled toolsets; never invent tool names or IDs.\n"
    "2) Never pretend a tool returned a result you do not have.\n"
    "3) Keep chain-of-thought internal; the assistant response should be concise.\n"
    "\n"
    "ENABLED TOOLSETS:\n{toolsets}\n"
    "\n"
    "SERVER INSTRUCTIONS:\n{instructions}\n"
)


def build_sys_prompt(instructions: str, enabled_toolsets: Sequence[str]) -> str:
    return SYSTEM_PROMPT.format(
        toolsets=", ".join(enabled_toolsets) or "(no toolsets enabled)",
        instructions=instructions.strip() or "(server instructions disabled)",
    )
