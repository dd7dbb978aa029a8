from __future__ import annotations

from typing import Any, Mapping, Sequence

from agentscope.agent import ReActAgent
from agentscope.formatter import OpenAIChatFormatter
from agentscope.memory import InMemoryMemory
from agentscope.tool import Toolkit

from agent.prompt_builder import build_sys_prompt
from instructions.composer import generate_instructions


def build_agent(
    model: Any,
    enabled_toolsets: Sequence[str],
    *,
    toolkit: Toolkit | None = None,
    name: str = "GitHub",
    max_iters: int = 6,
    env: Mapping[str, str] | None = None,
) -> ReActAgent:
    """Build a ReAct agent whose system prompt carries the server instructions.

    Instructions are composed when the agent is built, so the
    ``DISABLE_INSTRUCTIONS`` flag observed at that moment decides whether
    they are included.

    Args:
        model: The AgentScope chat model driving the agent.
        enabled_toolsets: Toolset names enabled for this deployment.
        toolkit: Toolkit holding the registered tools. A fresh one is used when omitted.
        name: Agent name.
        max_iters: Maximum reasoning/acting iterations per reply.
        env: Environment mapping; defaults to ``os.environ``.

    Returns:
        The configured agent.
    """
    toolsets = list(enabled_toolsets)
    instructions = generate_instructions(toolsets, env=env)
    sys_prompt = build_sys_prompt(instructions, toolsets)
    return ReActAgent(
        name=name,
        sys_prompt=sys_prompt,
        model=model,
        formatter=OpenAIChatFormatter(),
        toolkit=toolkit if toolkit is not None else Toolkit(),
        memory=InMemoryMemory(),
        max_iters=max_iters,
    )
