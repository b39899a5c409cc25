"""Command-line interface for RollingTime."""

import sys
import argparse
import logging
import yaml
from .config import Config
from .constants import EXIT_OK, EXIT_FAILURE, EXIT_CONFIG_ERROR
from .errors import WindowConfigError
from .logging import setup_logging, get_logger
from .runner import WindowRunner
from .structured_output import StructuredOutputWriter
from .window import RollingWindow

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rollingtime",
        description="Print rolling count/sum/min/max of a timestamped cost "
                    "series over a trailing time window."
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Path to the input file (lines of TIMESTAMP<TAB>COST)"
    )
    parser.add_argument(
        "--tau",
        type=float,
        default=None,
        help="Window duration, same unit as the timestamps (default: 60 or window.tau from config)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config.yaml (default: search for config.yaml)"
    )
    parser.add_argument(
        "--jsonl-dir",
        type=str,
        default=None,
        help="Also write one JSONL snapshot per accepted line into this directory"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Console log level (default: logging.console_level from config)"
    )
    return parser


def main(argv=None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # `--input` is required, but its absence is not an error
    if args.input is None:
        parser.print_usage(sys.stdout)
        return EXIT_OK

    try:
        config = Config(args.config)
    except WindowConfigError as e:
        logging.basicConfig(level=logging.ERROR, format='[%(levelname)s] %(message)s')
        logger.error("Invalid configuration: %s", e)
        return EXIT_CONFIG_ERROR
    except FileNotFoundError as e:
        logging.basicConfig(level=logging.ERROR, format='[%(levelname)s] %(message)s')
        logger.error("Config file not found: %s", e)
        return EXIT_FAILURE
    except (OSError, ValueError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.ERROR, format='[%(levelname)s] %(message)s')
        logger.error("Error loading config: %s", e)
        return EXIT_FAILURE

    setup_logging(config, console_level=args.log_level)

    tau = args.tau if args.tau is not None else config.tau
    try:
        window = RollingWindow(tau)
    except WindowConfigError as e:
        logger.error("Invalid window duration: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    structured_writer = None
    structured_cfg = config.structured_output_config
    structured_dir = args.jsonl_dir or (structured_cfg["base_dir"] if structured_cfg.get("enabled") else None)
    if structured_dir:
        try:
            structured_writer = StructuredOutputWriter(
                structured_dir, snapshots_filename=structured_cfg["snapshots_filename"]
            )
        except OSError as e:
            logger.error("Cannot create structured output directory %s: %s", structured_dir, e)
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_FAILURE

    runner = WindowRunner(window, structured_writer=structured_writer)
    try:
        runner.run_file(args.input)
    except OSError as e:
        logger.error("Cannot read input %s: %s", args.input, e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except UnicodeDecodeError as e:
        logger.error("Input %s is not valid UTF-8: %s", args.input, e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
