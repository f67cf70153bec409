"""Command-line interface for ssdwear."""

import argparse
import sys
from pathlib import Path
from typing import Any, NoReturn

from ssdwear import __version__
from ssdwear.check import CHECK_NAME, CheckSettings, run_check
from ssdwear.core.config import load_config
from ssdwear.core.context import Context
from ssdwear.core.logging import CheckLogger
from ssdwear.core.output import Output
from ssdwear.errors import SETUP_EXIT_CODE, ConfigError
from ssdwear.models import Thresholds, ToolPaths

# Flag dest -> key in the config "tools" mapping
TOOL_FLAGS = {
    "storcli": "storcli",
    "tw_cli": "tw_cli",
    "smartctl": "smartctl",
    "nvme": "nvme",
}


class CheckArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors are reported as UNKNOWN."""

    def error(self, message: str) -> NoReturn:
        """Print usage to stderr and the status line to stdout, then exit 4."""
        self.print_usage(sys.stderr)
        print(f"UNKNOWN: {message}")
        sys.exit(SETUP_EXIT_CODE)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = CheckArgumentParser(
        prog="check_ssd_wear",
        description="Report SSD wear level for directly attached and RAID-backed drives",
        epilog=(
            "Exit codes: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN, "
            "4 UNKNOWN (setup failure). With --test: 0 SSD found, 1 none."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"check_ssd_wear {__version__}",
    )
    parser.add_argument("--warning", type=int, metavar="N",
                        help="Warning below N%% remaining life (default: 10)")
    parser.add_argument("--critical", type=int, metavar="N",
                        help="Critical below N%% remaining life (default: 5)")
    parser.add_argument("--card", metavar="NAME",
                        help="Force controller type: lsi, 3ware or auto")
    parser.add_argument("--device", metavar="NAME",
                        help="Only check block devices whose path contains NAME")
    parser.add_argument("--brand", metavar="REGEX",
                        help="3ware drive model filter (default: INTEL|Samsung)")
    parser.add_argument("--storcli", metavar="PATH", help="storcli binary (default: storcli64)")
    parser.add_argument("--tw-cli", dest="tw_cli", metavar="PATH", help="tw_cli binary")
    parser.add_argument("--smartctl", metavar="PATH", help="smartctl binary")
    parser.add_argument("--nvme", metavar="PATH", help="nvme-cli binary")
    parser.add_argument("--timeout", type=int, metavar="SECONDS",
                        help="Timeout for each tool invocation (default: 60)")
    parser.add_argument("--config", type=Path, metavar="PATH",
                        help="Additional YAML config file")
    parser.add_argument("--log-file", dest="log_file", type=Path, metavar="PATH",
                        help="Append a JSONL record of each run")
    parser.add_argument("--debug", action="store_true", help="Print diagnostic lines")
    parser.add_argument("--test", action="store_true",
                        help="Only test for SSD presence (exit 0 found, 1 not found)")
    parser.add_argument("--nossd", action="store_true",
                        help="Report OK instead of UNKNOWN when no SSD is found")
    return parser


def build_settings(args: argparse.Namespace, config: dict[str, Any]) -> CheckSettings:
    """Merge command-line flags over the loaded configuration."""
    tool_paths = dict(config["tools"])
    for dest, key in TOOL_FLAGS.items():
        value = getattr(args, dest)
        if value:
            tool_paths[key] = value

    timeout = args.timeout if args.timeout is not None else config["timeout"]
    try:
        tools = ToolPaths(timeout=timeout, **tool_paths)
        thresholds = Thresholds(
            warning=int(args.warning if args.warning is not None else config["warning"]),
            critical=int(args.critical if args.critical is not None else config["critical"]),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid configuration: {e}")

    return CheckSettings(
        thresholds=thresholds,
        tools=tools,
        card=args.card,
        device=args.device,
        brand=args.brand or config["brand"],
        test=args.test,
        nossd=args.nossd,
    )


def main(argv: list[str] | None = None, context: Context | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    output = Output(debug=args.debug)

    try:
        config = load_config(args.config)
        settings = build_settings(args, config)
    except ConfigError as e:
        output.error(str(e))
        output.render()
        return 1 if args.test else SETUP_EXIT_CODE

    log_path = args.log_file or config.get("log_file")
    with CheckLogger(CHECK_NAME, Path(log_path) if log_path else None) as logger:
        exit_code = run_check(settings, output, context or Context(), logger)

    output.render()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
