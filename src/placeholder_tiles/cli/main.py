"""Command line entry point serving placeholder tiles over HTTP."""

import argparse
import socket
import sys

import uvicorn

from placeholder_tiles.app import create_app
from placeholder_tiles.config import config
from placeholder_tiles.logger import configure_logging, logger


def bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except (OSError, OverflowError):
        sock.close()
        raise
    return sock


def port_number(v: str) -> int:
    port = int(v)
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be 0-65535, got {port}")
    return port


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Serve 256x256 PNG placeholder map tiles at /{z}/{x}/{y}.png"
    )
    parser.add_argument(
        "-p",
        "--port",
        type=port_number,
        default=config.get("port"),
        help=f"Port to serve on (default: {config.get('port')})",
    )
    args = parser.parse_args(argv)

    configure_logging(config.get("log_level"))

    host = config.get("host")
    try:
        sock = bind_socket(host, args.port)
    except (OSError, OverflowError) as e:
        logger.critical("ListenFailure", host=host, port=args.port, error=str(e))
        sys.exit(1)

    logger.info("listening", host=host, port=args.port)
    server = uvicorn.Server(
        uvicorn.Config(create_app(), log_config=None, access_log=False)
    )
    server.run(sockets=[sock])


if __name__ == "__main__":
    main()
