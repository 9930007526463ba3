# calsun/server.py
import argparse
import logging

import uvicorn

from calsun.core.config import settings
from calsun.core.logging_config import setup_logging

logger = logging.getLogger("calsun.server")


def main(argv=None):
    """
    Start the CalSun web server (subscription page plus /calendar.ics).
    """
    parser = argparse.ArgumentParser(description="Serve sunrise/sunset calendar subscriptions.")
    parser.add_argument("--host", default=settings.HOST, help=f"Address to bind (default: {settings.HOST})")
    parser.add_argument("--port", type=int, default=settings.PORT, help=f"Port to bind (default: {settings.PORT})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    setup_logging(settings.LOG_LEVEL)
    logger.info(f"CalSun server starting on port {args.port}")
    logger.info(f"Open http://localhost:{args.port} in your browser")

    uvicorn.run(
        "calsun.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
