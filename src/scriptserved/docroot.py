from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

SAMPLE_INDEX_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>Welcome to scriptserved</title>
</head>
<body>
    <h1>Welcome to scriptserved</h1>
    <p>This is a sample HTML file served from the document root.</p>
    <p>Place your HTML files in the document root to serve them.</p>
</body>
</html>
"""

SAMPLE_INFO_PHP = """<?php
    echo "<h1>PHP is working!</h1>";
    echo "<p>This is generated by PHP running behind scriptserved.</p>";
    echo "<h2>PHP Information</h2>";
    phpinfo();
?>
"""


def interpreter_available(interpreter: str) -> bool:
    return os.access(interpreter, os.X_OK)


def prepare_document_root(root: Path, script_extension: str = "php") -> list[Path]:
    if root.exists():
        return []
    logger.info("Creating document root %s", root)
    root.mkdir(mode=0o700, parents=True)

    created: list[Path] = []
    samples = {"index.html": SAMPLE_INDEX_HTML}
    if script_extension == "php":
        samples[f"info.{script_extension}"] = SAMPLE_INFO_PHP
    for name, text in samples.items():
        path = root / name
        try:
            path.write_text(text, encoding="utf-8")
        except OSError:
            logger.warning("Failed to write sample %s", path)
            continue
        logger.info("Created sample %s", path)
        created.append(path)
    return created
