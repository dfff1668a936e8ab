"""The edit_file tool: replace text in a file, or create it."""

from __future__ import annotations

import os

from .tooling import Definition, ToolError, _string_fields, generate_schema


def _create_new_file(file_path: str, content: str) -> str:
    directory = os.path.dirname(file_path)
    if directory and directory != ".":
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as exc:
            raise ToolError(f"failed to create directory '{directory}': {exc}") from exc
    try:
        with open(file_path, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise ToolError(f"failed to create file '{file_path}': {exc}") from exc
    return f"Successfully created file {file_path}"


def edit_file(arguments: str) -> str:
    """Replace every occurrence of ``old_str`` with ``new_str`` in the file at ``path``.

    When the file does not exist and ``old_str`` is empty, the file is created
    holding ``new_str``.
    """
    fields = _string_fields(arguments, "edit_file", ("path", "old_str", "new_str"))
    path, old_str, new_str = fields["path"], fields["old_str"], fields["new_str"]
    if not path:
        raise ToolError("invalid input: 'path' cannot be empty")

    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            old_content = fh.read()
    except FileNotFoundError as exc:
        if not old_str:
            return _create_new_file(path, new_str)
        raise ToolError(f"error reading file '{path}': {exc}") from exc
    except OSError as exc:
        raise ToolError(f"error reading file '{path}': {exc}") from exc

    new_content = old_content.replace(old_str, new_str)
    if new_content == old_content and old_str:
        if old_content == new_str:
            return "OK (no change needed, content already matched)"
        raise ToolError(f"old_str '{old_str}' not found in file '{path}'")

    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(new_content)
    except OSError as exc:
        raise ToolError(f"error writing file '{path}': {exc}") from exc
    return "OK"


EDIT_FILE_DEFINITION = Definition(
    name="edit_file",
    description=(
        "Make edits to a text file. Replaces ALL occurrences of 'old_str' with 'new_str'. "
        "If 'old_str' is empty and the file doesn't exist, it creates it with 'new_str'."
    ),
    input_schema=generate_schema(
        {
            "path": "The path to the file",
            "old_str": (
                "Text to search for. If empty and file doesn't exist, creates the file with "
                "new_str as content. If not empty, MUST match exactly (limitation)."
            ),
            "new_str": (
                "Text to replace old_str with, or the initial content if creating a new file."
            ),
        },
        ["path", "new_str"],
    ),
    function=edit_file,
)