# dummyagent

A minimal chat agent for the terminal. It sends your messages to an
OpenAI-compatible chat completions endpoint and lets the model call three
local tools:

- `read_file`: return the contents of a file
- `list_files`: list files and directories, recursively, under a path
  (default `.`); directories carry a trailing `/`
- `edit_file`: replace every occurrence of `old_str` with `new_str` in a
  file, or create the file with `new_str` when it does not exist and
  `old_str` is empty

When the model asks for tools, they are run and their results are sent back
to it; this repeats until the model answers without tool calls, and then you
are prompted again.

## Installation

```sh
pip install .
```

## Configuration

Settings are read from the environment:

| Variable              | Meaning                                                                 |
|-----------------------|-------------------------------------------------------------------------|
| `OPENAI_API_KEY`      | API key, sent as `Authorization: Bearer <key>`. Required.               |
| `OPENAI_API_ENDPOINT` | If unset or empty, requests go to `https://api.siliconflow.cn/v1/chat/completions`. |
| `OPENAI_API_BASE`     | Used only when `OPENAI_API_ENDPOINT` is set: the endpoint is this base with `/v1/chat/completions` appended. |
| `OPENAI_MODEL`        | Model name. Defaults to `deepseek-ai/DeepSeek-V3`.                       |

If `OPENAI_API_KEY` is missing, the command prints an error and exits with
status 1. Defaults that are filled in are announced with an `Info:` line.

## Usage

```sh
export OPENAI_API_KEY=placeholder
dummyagent
```

Type a message at the `You:` prompt; empty lines are ignored. End input with
Ctrl-D to exit, or press Ctrl-C to quit. Before each request the whole
conversation is printed as JSON. If a request fails, the error is printed and
the request is sent again.

## Using it from Python

```python
from dummyagent.agent import Agent
from dummyagent.config import Config
from dummyagent.editor import EDIT_FILE_DEFINITION, edit_file
from dummyagent.lister import LIST_FILES_DEFINITION, list_files
from dummyagent.reader import READ_FILE_DEFINITION, read_file

print(list_files('{"path": "."}'))
```

- Each tool function takes the model's arguments as a JSON string, returns a
  string, and raises `dummyagent.tooling.ToolError` when it fails.
  `list_files` returns a JSON array, or `null` when there is nothing to list.
- `dummyagent.tooling.Definition` bundles a tool's name, description, input
  schema and function; `generate_schema(properties, required)` builds an
  object schema of string properties.
- `Config.from_env(environ)` reads the key, endpoint and model from a mapping
  (default `os.environ`); `dummyagent.cli.validate_env(environ)` does the same
  and fills in the defaults above, raising `ValueError` without a key.
- `Agent(get_user_message, tools, model, config=None, client=None)` runs the
  chat with `run()`. `get_user_message` returns the next line or `None` at the
  end of input; `client` is an `httpx.Client`. `complete(conversation)` sends
  one request and returns a `Response`, raising `dummyagent.agent.APIError`
  on failure; `call_tools(calls)` runs tool calls and returns tool messages.
- The request and response types live in `dummyagent.openai_types`.

## What it does not do

Responses are not streamed, conversations are not saved between runs, and
there are no commands inside the chat: the only way out is ending input or
interrupting the program.

## Running the tests

```sh
pip install ".[test]"
pytest
```