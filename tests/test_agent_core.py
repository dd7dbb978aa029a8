from __future__ import annotations

import unittest
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

pytest.importorskip("agentscope")

from agent.core import build_agent
from instructions.composer import BASE_INSTRUCTIONS, CONTEXT_INSTRUCTIONS


class _FakeReActAgent:
    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs


class AgentCoreTests(unittest.TestCase):
    @patch("agent.core.ReActAgent", _FakeReActAgent)
    def test_build_agent_injects_instructions_into_sys_prompt(self) -> None:
        model = object()
        agent = build_agent(model, ["context"], env={}, max_iters=3)

        sys_prompt = agent.kwargs["sys_prompt"]
        self.assertIn(BASE_INSTRUCTIONS, sys_prompt)
        self.assertIn(CONTEXT_INSTRUCTIONS, sys_prompt)
        self.assertIs(agent.kwargs["model"], model)
        self.assertEqual(agent.kwargs["max_iters"], 3)
        self.assertEqual(agent.kwargs["name"], "GitHub")

    @patch("agent.core.ReActAgent", _FakeReActAgent)
    def test_build_agent_reuses_given_toolkit(self) -> None:
        toolkit = object()
        agent = build_agent(object(), [], toolkit=toolkit, env={})  # type: ignore[arg-type]
        self.assertIs(agent.kwargs["toolkit"], toolkit)

    @patch("agent.core.ReActAgent", _FakeReActAgent)
    def test_build_agent_respects_disable_flag(self) -> None:
        agent = build_agent(object(), ["issues"], env={"DISABLE_INSTRUCTIONS": "true"})
        sys_prompt = agent.kwargs["sys_prompt"]
        self.assertNotIn(BASE_INSTRUCTIONS, sys_prompt)
        self.assertIn("(server instructions disabled)", sys_prompt)


if __name__ == "__main__":
    unittest.main()
