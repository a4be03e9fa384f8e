from __future__ import annotations

import argparse
import logging

import uvicorn

from .config import load_config, load_config_from_env
from .server import create_app

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stocksim-server", description="Asset simulation and option pricing server"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to TOML/YAML/JSON config (defaults to $STOCKSIM_CONFIG)",
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else load_config_from_env()
    app = create_app(config)

    LOGGER.info("Starting server on http://%s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
