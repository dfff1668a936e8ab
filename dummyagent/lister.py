"""The list_files tool: list everything below a directory."""

from __future__ import annotations

import json
import os
import stat
from typing import Iterator

from .tooling import Definition, ToolError, _string_fields, generate_schema


def _walk(root: str, prefix: str = "") -> Iterator[str]:
    """Yield paths below ``root`` in lexical, depth-first order; directories end in '/'."""
    with os.scandir(os.path.join(root, prefix) if prefix else root) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        rel = os.path.join(prefix, entry.name) if prefix else entry.name
        if entry.is_dir(follow_symlinks=False):
            yield rel + "/"
            yield from _walk(root, rel)
        else:
            yield rel


def list_files(arguments: str = "") -> str:
    """List files and directories under ``path`` (default ".") as a JSON array.

    An empty listing is reported as JSON ``null``.
    """
    path = ""
    if arguments and arguments != "null":
        path = _string_fields(arguments, "list_files", ("path",))["path"]
    directory = path or "."

    try:
        is_dir = stat.S_ISDIR(os.lstat(directory).st_mode)
        files = list(_walk(directory)) if is_dir else []
    except OSError as exc:
        raise ToolError(f"error listing files in '{directory}': {exc}") from exc
    return json.dumps(files or None, ensure_ascii=False, separators=(",", ":"))


LIST_FILES_DEFINITION = Definition(
    name="list_files",
    description=(
        "List files and directories at a given path. If no path is provided, lists files "
        "in the current directory. Returns a JSON array of strings, directories have a "
        "trailing slash."
    ),
    input_schema=generate_schema(
        {
            "path": (
                "Optional relative path to list files from. Defaults to current directory "
                "if not provided."
            )
        }
    ),
    function=list_files,
)