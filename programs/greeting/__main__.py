"""Entry point: python -m programs.greeting"""

import logging
import sys
from pathlib import Path

from ioaction import Console, Evaluator, RuntimeConfig, Transcript, validate_action

from programs.greeting.program import MAIN

logger = logging.getLogger(__name__)


def main() -> int:
    config = RuntimeConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    errors = validate_action(MAIN)
    if errors:
        for error in errors:
            logger.error("Invalid program: %s", error)
        return 2

    transcript = Transcript() if config.transcript_path else None
    evaluator = Evaluator(
        Console(line_terminator=config.line_terminator), transcript=transcript
    )

    try:
        evaluator.perform(MAIN)
    except EOFError:
        logger.error("Input ended after %d steps; dialogue aborted", evaluator.steps)
        return 1
    finally:
        if transcript is not None and config.transcript_path:
            Path(config.transcript_path).write_text(transcript.model_dump_json(indent=2))
            logger.info("Transcript written to %s", config.transcript_path)

    logger.info("Dialogue finished after %d steps", evaluator.steps)
    return 0


if __name__ == "__main__":
    sys.exit(main())
