"""Exporting and re-loading documentation maps.

Three on-disk forms are supported:

* ``json`` - the map itself as ``documentation.json``.
* ``markdown`` - every file concatenated into ``documentation.md``.
* ``files`` - one file per map entry under the output directory.

The file tree helpers rebuild a folder hierarchy from the flat virtual paths
for display.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Literal, Mapping, Union

from pydantic import BaseModel, Field

from docbuilder.config import ExportFormat
from docbuilder.errors import ExportError
from docbuilder.utils import ensure_dir, load_json, save_json

JSON_EXPORT_NAME = "documentation.json"
MARKDOWN_EXPORT_NAME = "documentation.md"


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def export_json(docs: Mapping[str, str]) -> str:
    """Serialise *docs* as a pretty-printed JSON object (non-ASCII kept)."""
    return json.dumps(dict(docs), indent=2, ensure_ascii=False)


def export_markdown(docs: Mapping[str, str]) -> str:
    """Concatenate every file under a ``# <path>`` heading, separated by rules."""
    return "".join(f"# {path}\n\n{content}\n\n---\n\n" for path, content in docs.items())


def _safe_target(root: Path, virtual_path: str) -> Path:
    relative = virtual_path.lstrip("/")
    if not relative:
        raise ExportError(f"Refusing to export empty path {virtual_path!r}")
    target = (root / relative).resolve()
    if target == root or not target.is_relative_to(root):
        raise ExportError(f"Refusing to export {virtual_path!r} outside {root}")
    return target


def write_files(docs: Mapping[str, str], output_dir: Union[str, Path]) -> list[Path]:
    """Write each map entry as its own file below *output_dir*.

    Every path is checked before anything is written, so a rejected map
    leaves the directory untouched.

    Raises:
        ExportError: If any path would land outside *output_dir*, is also
            the folder of another path, or cannot be written.
    """
    root = ensure_dir(output_dir)
    targets = [(_safe_target(root, path), content) for path, content in docs.items()]

    files = {target for target, _ in targets}
    for target, _ in targets:
        clash = next((p for p in target.parents if p in files), None)
        if clash is not None:
            raise ExportError(f"Cannot export {clash} as both a file and a folder")

    written: list[Path] = []
    for target, content in targets:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ExportError(f"Could not write {target}: {exc}") from exc
        written.append(target)
    return written


def write_export(
    docs: Mapping[str, str],
    output_dir: Union[str, Path],
    fmt: Union[ExportFormat, str] = ExportFormat.JSON,
) -> Path:
    """Export *docs* to *output_dir* in the requested format.

    Returns:
        The written file for ``json``/``markdown``, or the directory for
        ``files``.

    Raises:
        ExportError: For an unknown format or an unsafe path.
    """
    try:
        export_format = ExportFormat(fmt)
    except ValueError as exc:
        raise ExportError(f"Unknown export format: {fmt!r}") from exc

    if export_format == ExportFormat.JSON:
        return save_json(dict(docs), Path(output_dir) / JSON_EXPORT_NAME)

    if export_format == ExportFormat.MARKDOWN:
        target = ensure_dir(output_dir) / MARKDOWN_EXPORT_NAME
        target.write_text(export_markdown(docs), encoding="utf-8")
        return target

    write_files(docs, output_dir)
    return Path(output_dir)


def load_documentation(path: Union[str, Path]) -> dict[str, str]:
    """Load a map previously written by :func:`write_export` in JSON form.

    Raises:
        ExportError: If the file is missing, is not JSON, or is not a
            string-to-string object.
    """
    try:
        data = load_json(path)
    except FileNotFoundError as exc:
        raise ExportError(f"Documentation export not found: {path}") from exc
    except (OSError, ValueError) as exc:
        raise ExportError(f"Documentation export is unreadable: {path} ({exc})") from exc

    if not all(isinstance(k, str) and isinstance(v, str) for k, v in data.items()):
        raise ExportError(f"Documentation export must map paths to markdown strings: {path}")
    return data


# ---------------------------------------------------------------------------
# File tree
# ---------------------------------------------------------------------------


class FileNode(BaseModel):
    """A file or folder in the documentation tree."""

    name: str
    path: str = Field(..., description="Absolute virtual path of this node")
    type: Literal["file", "folder"]
    children: list["FileNode"] = Field(default_factory=list)


def build_file_tree(paths: Iterable[str]) -> list[FileNode]:
    """Rebuild folders and files from flat ``/``-separated paths.

    Nodes keep first-seen order.  A node's type is fixed when it is first
    created: the last segment of a path is a file, every earlier one a folder.
    """
    root: list[FileNode] = []
    for path in paths:
        parts = [p for p in path.split("/") if p]
        level = root
        for idx, part in enumerate(parts):
            node = next((n for n in level if n.name == part), None)
            if node is None:
                node = FileNode(
                    name=part,
                    path="/" + "/".join(parts[: idx + 1]),
                    type="file" if idx == len(parts) - 1 else "folder",
                )
                level.append(node)
            level = node.children
    return root
