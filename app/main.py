# app/main.py
import sys

import uvicorn

from app.api import create_app
from app.utils.logging import get_logger
from app.utils.settings import HOST, PORT, LOG_LEVEL

# przy "python -m app.main" __name__ to "__main__", poza hierarchia "app"
logger = get_logger("app.main")

app = create_app()


def run():
    logger.info(f"Starting Branded Products API on {HOST}:{PORT}")
    try:
        # uvicorn sam loguje blad bindowania i konczy SystemExit(1)
        uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
    except SystemExit as e:
        if e.code:
            logger.error(f"Server failed to start on {HOST}:{PORT}")
        raise
    except OSError as e:
        logger.error(f"Cannot bind {HOST}:{PORT}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
