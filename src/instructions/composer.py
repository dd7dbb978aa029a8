from __future__ import annotations

import logging
import os
from typing import Iterable, Mapping

from instructions.hints import get_toolset_instructions

logger = logging.getLogger(__name__)

_DISABLE_ENV_NAME = "DISABLE_INSTRUCTIONS"
CONTEXT_TOOLSET = "context"

BASE_INSTRUCTIONS = """The GitHub MCP Server provides tools to interact with GitHub platform.

Tool selection guidance:
\t1. Use 'list_*' tools for broad, simple retrieval and pagination of all items of a type (e.g., all issues, all PRs, all branches) with basic filtering.
\t2. Use 'search_*' tools for targeted queries with specific criteria, keywords, or complex filters (e.g., issues with certain text, PRs by author, code containing functions).

Context management:
\t1. Use pagination whenever possible with batches of 5-10 items.
\t2. Use minimal_output parameter set to true if the full information is not needed to accomplish a task.

Tool usage guidance:
\t1. For 'search_*' tools: Use separate 'sort' and 'order' parameters if available for sorting results - do not include 'sort:' syntax in query strings. Query strings should contain only search criteria (e.g., 'org:google language:python'), not sorting instructions."""

CONTEXT_INSTRUCTIONS = (
    "Always call 'get_me' first to understand current user permissions and context."
)


def instructions_disabled(env: Mapping[str, str] | None = None) -> bool:
    # Read on every call so the flag can be flipped without a restart.
    env = os.environ if env is None else env
    return env.get(_DISABLE_ENV_NAME) == "true"


def generate_instructions(
    enabled_toolsets: Iterable[str], env: Mapping[str, str] | None = None
) -> str:
    """Compose the server instructions for the enabled toolsets.

    The result is the baseline text, then the ``get_me`` hint when the
    ``context`` toolset is enabled, then one hint per known toolset in the
    order given. Unknown toolsets contribute nothing. When
    ``DISABLE_INSTRUCTIONS`` is ``"true"`` the result is an empty string.
    """
    if instructions_disabled(env):
        logger.debug("%s=true, returning empty instructions", _DISABLE_ENV_NAME)
        return ""

    toolsets = list(enabled_toolsets)
    fragments: list[str] = []

    if CONTEXT_TOOLSET in toolsets:
        fragments.append(CONTEXT_INSTRUCTIONS)

    for toolset in toolsets:
        hint = get_toolset_instructions(toolset)
        if hint:
            fragments.append(hint)

    logger.debug(
        "composed instructions from %d fragment(s) including baseline",
        len(fragments) + 1,
    )
    return " ".join([BASE_INSTRUCTIONS, *fragments])
