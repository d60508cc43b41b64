from __future__ import annotations

import logging

from .config import load_config
from .docroot import interpreter_available, prepare_document_root
from .server import run_server

logger = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not interpreter_available(config.interpreter):
        logger.warning(
            "Interpreter %s not found or not executable; %s scripts will fail with 500",
            config.interpreter,
            config.script_extension,
        )
    if config.create_samples:
        prepare_document_root(config.document_root, config.script_extension)
    try:
        run_server(config)
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
