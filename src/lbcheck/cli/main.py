# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""lbcheck CLI."""

import argparse
import logging

from ..config import load_app_config, load_probe_settings
from ..constants import DEFAULT_CONFIG_PATH
from ..errors import ConfigError
from ..log import setup_logging
from ..runtime import LbCheck

logger = logging.getLogger("lbcheck")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check that a load balancer relays echo traffic for every configured application port"
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help=f"Configuration file path or inline JSON (default: {DEFAULT_CONFIG_PATH})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_app_config(args.config)
    except ConfigError as exc:
        logger.error("failed to read configuration, reason %s", exc)
        return 1
    logger.info("configuration %s", config)

    LbCheck(settings=load_probe_settings()).run(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
