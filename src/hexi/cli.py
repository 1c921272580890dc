from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from hexi.app import HexiApp
from hexi.core import logging_setup
from hexi.core.config import ConfigError, load_config
from hexi.core.io import load_buffer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hexi", description="hexi terminal hex viewer (Textual)")
    parser.add_argument("path", help="Path to binary file")
    parser.add_argument("--config", help="Path to config YAML (default: ~/.config/hexi/config.yaml)")
    parser.add_argument("--width", type=int, help="Initial bytes per row (overrides config)")
    parser.add_argument("--log-level", help="Log level, e.g. DEBUG or INFO (default: WARNING)")
    parser.add_argument("--log-file", help="Log file path (default: ~/.local/share/hexi/logs/hexi.log)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"hexi: {e}", file=sys.stderr)
        return 2
    if args.width is not None:
        if args.width <= 0:
            print(f"hexi: --width must be positive, got {args.width}", file=sys.stderr)
            return 2
        config = replace(config, bytes_per_row=args.width)

    runtime = logging_setup.configure(args.log_level, args.log_file, config_level=config.log_level)
    logger.info("logging configured level=%s file=%s", runtime.level_name, runtime.file_path)

    try:
        data = load_buffer(args.path)
    except OSError as e:
        logger.error("cannot open %s: %s", args.path, e)
        print(f"hexi: {e}", file=sys.stderr)
        return 2

    app = HexiApp(args.path, config=config, data=data)
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
