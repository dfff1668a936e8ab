"""Command-line entry point: chat with the agent on standard input."""

from __future__ import annotations

import dataclasses
import os
import sys
from typing import Mapping, Optional, Sequence, TextIO

import httpx

from .agent import DEFAULT_TIMEOUT, RED, RESET, Agent
from .config import Config
from .editor import EDIT_FILE_DEFINITION
from .lister import LIST_FILES_DEFINITION
from .reader import READ_FILE_DEFINITION

DEFAULT_API_ENDPOINT = "https://api.siliconflow.cn/v1/chat/completions"
DEFAULT_MODEL = "deepseek-ai/DeepSeek-V3"


def validate_env(environ: Mapping[str, str] | None = None) -> Config:
    """Read the configuration from ``environ``, filling in defaults.

    Raises ValueError when no API key is set.
    """
    env = os.environ if environ is None else environ
    config = Config.from_env(env)
    if not config.api_key:
        raise ValueError("OPENAI_API_KEY environment variable not set.")

    if not env.get("OPENAI_API_ENDPOINT", ""):
        config = dataclasses.replace(config, api_endpoint=DEFAULT_API_ENDPOINT)
        print(f"Info: OPENAI_API_ENDPOINT not set, defaulting to {DEFAULT_API_ENDPOINT}")
    if not config.model:
        config = dataclasses.replace(config, model=DEFAULT_MODEL)
        print(f"Info: OPENAI_MODEL not set, defaulting to {config.model}")
    return config


def _line_reader(stream: TextIO):
    """Return a callable giving the next line of ``stream``, or None at its end."""

    def read() -> Optional[str]:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{RED}Error reading input: {exc}{RESET}", file=sys.stderr)
            return None
        if not line:
            return None
        return line.removesuffix("\n").removesuffix("\r")

    return read


def main(argv: Sequence[str] | None = None) -> int:
    """Run the agent on standard input; the command takes no arguments."""
    try:
        config = validate_env()
    except ValueError as exc:
        print(f"{RED}Error: {exc}{RESET}", file=sys.stderr)
        return 1

    tools = [EDIT_FILE_DEFINITION, LIST_FILES_DEFINITION, READ_FILE_DEFINITION]
    with httpx.Client(timeout=DEFAULT_TIMEOUT) as client:
        agent = Agent(_line_reader(sys.stdin), tools, config.model, config=config, client=client)
        try:
            agent.run()
        except Exception as exc:  # noqa: BLE001 - reported to the user as the exit reason
            print(f"{RED}Agent exited with error: {exc}{RESET}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())