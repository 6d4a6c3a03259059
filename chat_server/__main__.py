from argparse import ArgumentParser

import uvicorn

from chat_server.config import settings


def main() -> None:
    parser = ArgumentParser("Shout server")
    parser.add_argument("--host", default=settings.HOST, help=f"Server host (default: {settings.HOST})")
    parser.add_argument("--port", type=int, default=settings.PORT, help=f"Server port (default: {settings.PORT})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args()

    uvicorn.run(
        "chat_server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
