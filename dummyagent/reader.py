"""The read_file tool: return a file's contents."""

from __future__ import annotations

from .tooling import Definition, ToolError, _string_fields, generate_schema


def read_file(arguments: str) -> str:
    """Return the contents of the file named by ``path``."""
    path = _string_fields(arguments, "read_file", ("path",))["path"]
    if not path:
        raise ToolError("missing required parameter 'path' for read_file")
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            return fh.read()
    except OSError as exc:
        raise ToolError(f"error reading file '{path}': {exc}") from exc


READ_FILE_DEFINITION = Definition(
    name="read_file",
    description=(
        "Read the contents of a given relative file path. Use this when you want to see "
        "what's inside a file. Do not use this with directory names."
    ),
    input_schema=generate_schema(
        {"path": "The relative path of a file in the working directory."},
        ["path"],
    ),
    function=read_file,
)