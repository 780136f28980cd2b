import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from spread_sim.config import load_config
from spread_sim.report import to_text
from spread_sim.simulator import SpreadSimulator


def new_logger(level: str, log_file: Optional[Path] = None) -> logging.Logger:
    log = logging.getLogger("spread_sim")
    log.setLevel(level.upper())
    fmt = logging.Formatter(
        fmt="%(asctime)sZ %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    fmt.converter = time.gmtime  # UTC
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for h in handlers:
        h.setFormatter(fmt)
        log.addHandler(h)
    return log


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate a cross-venue round trip without trading")
    parser.add_argument("--config", type=Path, default=Path("config/sol_usdc.yaml"))
    parser.add_argument("--log-level", default="WARNING", help="Logging level for the spread_sim logger")
    parser.add_argument("--log-file", type=Path, default=None, help="Optional file to mirror log records to")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write report")
    args = parser.parse_args()

    log = new_logger(args.log_level, args.log_file)
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        log.error("invalid configuration %s: %s", args.config, exc)
        sys.exit(2)

    report = SpreadSimulator(config).run_sync()
    report_text = to_text(report)

    if args.output:
        args.output.write_text(report_text, encoding="utf-8")
    else:
        print(report_text)


if __name__ == "__main__":
    main()
