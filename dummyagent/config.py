"""Connection settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

COMPLETIONS_PATH = "/v1/chat/completions"


@dataclass(frozen=True)
class Config:
    """API key, endpoint and model for the chat completions API."""

    api_key: str = ""
    api_endpoint: str = COMPLETIONS_PATH
    model: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        return cls(
            env.get("OPENAI_API_KEY", ""),
            env.get("OPENAI_API_BASE", "") + COMPLETIONS_PATH,
            env.get("OPENAI_MODEL", ""),
        )