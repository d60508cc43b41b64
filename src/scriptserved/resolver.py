from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path


INDEX_HTML = "index.html"
INDEX_SCRIPT_STEM = "index"


class TargetKind(enum.Enum):
    STATIC = "static"
    SCRIPT = "script"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolvedTarget:
    kind: TargetKind
    path: str | None = None


NOT_FOUND = ResolvedTarget(TargetKind.NOT_FOUND)


def file_exists(path: str) -> bool:
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def file_extension(path: str) -> str:
    name = path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot + 1 :]


def resolve_target(
    request_path: str,
    document_root: Path | str,
    script_extension: str = "php",
) -> ResolvedTarget:
    # Plain concatenation: ".." segments are not rejected.
    base = str(document_root).rstrip("/") + request_path

    if request_path.endswith("/"):
        index_html = base + INDEX_HTML
        if file_exists(index_html):
            return ResolvedTarget(TargetKind.STATIC, index_html)
        index_script = f"{base}{INDEX_SCRIPT_STEM}.{script_extension}"
        if file_exists(index_script):
            return ResolvedTarget(TargetKind.SCRIPT, index_script)
        return NOT_FOUND

    if not file_exists(base):
        return NOT_FOUND
    if file_extension(base).lower() == script_extension.lower():
        return ResolvedTarget(TargetKind.SCRIPT, base)
    return ResolvedTarget(TargetKind.STATIC, base)
