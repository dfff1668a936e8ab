"""A chat agent that talks to a chat completions API and runs the tools it asks for."""

from __future__ import annotations

import json
from typing import Callable, Iterable, Optional

import httpx

from .config import Config
from .openai_types import Message, Request, Response, ToolCall
from .tooling import Definition, ToolError

BLUE = "\u001b[94m"
YELLOW = "\u001b[93m"
GREEN = "\u001b[92m"
RED = "\u001b[91m"
RESET = "\u001b[0m"

DEFAULT_TIMEOUT = 60.0
MAX_TOKENS = 2048
TEMPERATURE = 0.7

SYSTEM_PROMPT = (
    "You are a helpful Go programmer assistant. You have access to tools to interact "
    "with the local filesystem (read, list, edit files). Use them when appropriate to "
    "fulfill the user's request. When editing, be precise about the changes. Respond "
    "ONLY with tool calls if you need to use tools, otherwise respond with text."
)

UserMessageSource = Callable[[], Optional[str]]


class APIError(Exception):
    """Raised when a chat completion request cannot be completed."""


class Agent:
    """Interactive loop: read user input, query the model, execute requested tools.

    ``get_user_message`` returns the next line typed by the user, or ``None``
    once input is exhausted.
    """

    def __init__(
        self,
        get_user_message: UserMessageSource,
        tools: Iterable[Definition],
        model: str,
        config: Config | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.get_user_message = get_user_message
        self.tools: dict[str, Definition] = {tool.name: tool for tool in tools}
        self.model = model
        self.config = config if config is not None else Config.from_env()
        self.client = client if client is not None else httpx.Client(timeout=DEFAULT_TIMEOUT)
        self.system_prompt = SYSTEM_PROMPT

    def run(self) -> None:
        """Chat until the user's input runs out."""
        conversation = [Message(role="system", content=self.system_prompt)]
        print("Chat with AI (use 'ctrl-c' to quit)")

        while True:
            print(f"{BLUE}You{RESET}: ", end="", flush=True)
            user_input = self.get_user_message()
            if user_input is None:
                print("\nExiting.")
                return
            if not user_input:
                continue
            conversation.append(Message(role="user", content=user_input))
            self._respond(conversation)

    def _respond(self, conversation: list[Message]) -> None:
        """Query the model until it answers without asking for tools."""
        while True:
            dump = json.dumps(
                [message.to_dict() for message in conversation], indent=2, ensure_ascii=False
            )
            print(f"conversations: {dump}")

            try:
                response = self.complete(conversation)
            except APIError as exc:
                print(f"{RED}API Error{RESET}: {exc}")
                continue
            if not response.choices:
                print(f"{RED}Error{RESET}: OpenAI response contained no choices.")
                continue

            assistant = response.choices[0].message
            conversation.append(assistant)
            if assistant.content:
                print(f"{YELLOW}AI{RESET}: {assistant.content}")
            if not assistant.tool_calls:
                return
            conversation.extend(self.call_tools(assistant.tool_calls))

    def call_tools(self, calls: Iterable[ToolCall]) -> list[Message]:
        """Run each function call and return one tool message per call."""
        results: list[Message] = []
        for call in calls:
            if call.type != "function":
                continue
            name = call.function.name
            arguments = call.function.arguments
            print(f"{GREEN}Tool Call{RESET}: {name}({arguments})")

            result = Message(role="tool", tool_call_id=call.id, name=name)
            definition = self.tools.get(name)
            if definition is None:
                error = f"tool '{name}' not found by agent"
                print(f"{RED}Tool Error{RESET}: {error}")
                result.content = error
            else:
                try:
                    result.content = definition.function(arguments)
                except ToolError as exc:
                    error = f"error executing tool '{name}': {exc}"
                    print(f"{RED}Tool Error{RESET}: {error}")
                    result.content = error
            results.append(result)
        return results

    def complete(self, conversation: Iterable[Message]) -> Response:
        """Send the conversation to the completions endpoint and decode the reply."""
        request = Request(
            model=self.model,
            messages=list(conversation),
            tools=[definition.to_tool() for definition in self.tools.values()],
            tool_choice="auto",
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
        )
        payload = json.dumps(request.to_dict(), ensure_ascii=False).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }

        try:
            reply = self.client.post(self.config.api_endpoint, content=payload, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise APIError(f"failed to send HTTP request: {exc}") from exc

        body = reply.text
        if reply.status_code != 200:
            raise APIError(f"API request failed with status {reply.status_code}: {body}")

        try:
            data = json.loads(reply.content)
        except ValueError as exc:
            raise APIError(f"failed to unmarshal response JSON: {exc}. Body: {body}") from exc
        if data is not None and not isinstance(data, dict):
            raise APIError(
                f"failed to unmarshal response JSON: expected an object, "
                f"got {type(data).__name__}. Body: {body}"
            )
        return Response.from_dict(data)