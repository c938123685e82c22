#!/usr/bin/env python3
"""
Reversi AI Engine - Main Entry Point
"""

import argparse
import logging

import uvicorn

from reversi.config import EngineConfig, load_config
from reversi.search import StrategyKind
from reversi.server import create_app

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve a Reversi game against the AI.")
    parser.add_argument("--config", type=str, default="reversi.json", help="JSON settings file")
    parser.add_argument("--strategy", type=str, default=None,
                        choices=[kind.value for kind in StrategyKind], help="AI strategy")
    parser.add_argument("--depth", type=int, default=None, help="Minimax depth in plies")
    parser.add_argument("--size", type=int, default=None, help="Board size (even)")
    parser.add_argument("--host", type=str, default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Bind port")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("reversi")

    config = load_config(args.config)
    overrides = {
        "strategy": args.strategy,
        "max_depth": args.depth,
        "size": args.size,
        "host": args.host,
        "port": args.port,
    }
    config = EngineConfig.model_validate({**config.model_dump(),
                                          **{k: v for k, v in overrides.items() if v is not None}})

    logger.info("Starting Reversi AI Engine (%s, depth %d, %dx%d)",
                config.strategy.value, config.max_depth, config.size, config.size)
    logger.info("Server will be available at: http://%s:%d", config.host, config.port)

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=args.log_level.lower(),
    )

if __name__ == "__main__":
    main()
