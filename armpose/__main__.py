# armpose/__main__.py
import argparse
import logging
import os

import uvicorn

from . import config as C


def main():
    ap = argparse.ArgumentParser(description="Serve the latest robot-arm pose over HTTP.")
    ap.add_argument("--host", default=C.HTTP_HOST)
    ap.add_argument("--port", type=int, default=C.HTTP_PORT)
    ap.add_argument("--db-url", default=None,
                    help="SQLAlchemy URL; overrides ARMPOSE_DB_* settings")
    ap.add_argument("--log-level", default="info")
    ap.add_argument("--reload", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.db_url:
        os.environ["ARMPOSE_DB_URL"] = args.db_url

    uvicorn.run(
        "armpose.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
