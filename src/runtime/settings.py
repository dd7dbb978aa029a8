from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from instructions.hints import known_toolsets

logger = logging.getLogger(__name__)

_ENV_NAME = "GITHUB_TOOLSETS"
_ALL_TOOLSETS = "all"

DEFAULT_TOOLSETS = ("context", "repos", "issues", "pull_requests", "users")


@dataclass(frozen=True)
class ServerSettings:
    enabled_toolsets: tuple[str, ...] = DEFAULT_TOOLSETS


def parse_toolsets(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _expand_all(toolsets: list[str]) -> list[str]:
    if _ALL_TOOLSETS not in toolsets:
        return toolsets
    expanded: list[str] = []
    for toolset in toolsets:
        if toolset != _ALL_TOOLSETS:
            expanded.append(toolset)
            continue
        # Default set first, then any hinted toolset outside it.
        for name in [*DEFAULT_TOOLSETS, *known_toolsets()]:
            if name not in toolsets and name not in expanded:
                expanded.append(name)
    return expanded


def resolve_toolsets(raw: str) -> list[str]:
    """Turn a comma-separated toolset value into the enabled toolset list.

    ``all`` expands in place to the default toolsets plus every toolset that
    carries a usage hint. A value with no names falls back to the defaults.
    """
    toolsets = _expand_all(parse_toolsets(raw))
    return toolsets or list(DEFAULT_TOOLSETS)


def load_settings(env: Mapping[str, str] | None = None) -> ServerSettings:
    if env is None:
        load_dotenv(override=False)
        env = os.environ
    toolsets = resolve_toolsets(env.get(_ENV_NAME, ""))
    logger.debug("enabled toolsets: %s", toolsets)
    return ServerSettings(enabled_toolsets=tuple(toolsets))
