import logging

import uvicorn

from fact_generator.api.app import app

logger = logging.getLogger(__name__)

HOST = "0.0.0.0"
PORT = 8080


def main() -> None:
    logger.info("server.start addr=%s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
