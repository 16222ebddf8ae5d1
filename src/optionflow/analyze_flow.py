"""
Flow analysis CLI.

Reads one batch of trade prints, reconstructs its spreads and prints the
report as JSON (or as a rich table with --tui).
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Any, NoReturn, Optional

from .assembly import assemble_spreads
from .config_loader import ConfigBundle, large_trade_threshold, load_config_bundle
from .errors import TradeParseError, build_error, error_lines
from .flow_summary import summarize_flow
from .logging_config import audit_log, generate_session_id, set_session_id, setup_logging
from .trade_parser import TradeParser

logger = logging.getLogger(__name__)


def analyze_flow(
    file_path: str,
    *,
    config: Optional[ConfigBundle] = None,
    config_dir: Optional[str] = None,
    strict: Optional[bool] = None,
    threshold: Optional[float] = None,
) -> dict[str, Any]:
    """
    Main entry point for flow analysis of one collected trade batch.

    Returns the report, or a `build_error` payload when the batch cannot be read.
    """
    try:
        if config is None:
            config = load_config_bundle(config_dir=config_dir, strict=strict)
        if threshold is None:
            threshold = large_trade_threshold(config, strict=strict)
    except (FileNotFoundError, ValueError) as exc:
        return build_error(
            "Invalid configuration.",
            details=str(exc),
            hint="Check config/runtime_config.json or pass --threshold.",
        )

    # Step 1: Parse trades
    try:
        trades = TradeParser.parse(file_path)
    except FileNotFoundError:
        return build_error(
            "Trade file not found.", details=file_path, hint="Check the path to the trades JSON."
        )
    except json.JSONDecodeError as exc:
        return build_error("Trade file is not valid JSON.", details=str(exc))
    except TradeParseError as exc:
        return build_error(
            "Malformed trade record.",
            details=str(exc),
            hint="Records must use the upstream trade field names.",
        )

    roots = sorted({trade.root for trade in trades})
    if len(roots) > 1:
        return build_error(
            "Trade batch mixes underlyings.",
            details=", ".join(roots),
            hint="Split the batch so each file holds one symbol.",
        )
    symbol = roots[0] if roots else ""

    # Step 2: Reconstruct spreads
    spreads = assemble_spreads(trades)

    # Step 3: Batch-level signals
    summary = summarize_flow(trades, spreads, threshold=threshold)

    logger.info("%s: %d trades -> %d spreads", symbol or "(empty)", len(trades), len(spreads))
    audit_log(
        "Flow analyzed",
        symbol=symbol,
        trades=len(trades),
        spreads=len(spreads),
        large_trades=summary.large_trade_count,
    )

    return {
        "analysis_time": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "symbol": symbol,
        "trade_count": len(trades),
        "large_trade_threshold": threshold,
        "spreads": [spread.to_dict() for spread in spreads],
        "flow_summary": summary.to_dict(),
    }


def _exit_with_error(payload: dict[str, Any]) -> NoReturn:
    for line in error_lines(payload):
        print(line, file=sys.stderr)
    print(json.dumps(payload, indent=2), file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Reconstruct option spreads from a batch of trade prints."
    )
    parser.add_argument("file_path", type=str, help="Path to the trades JSON file.")
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Absolute net value above which a spread counts as a large trade.",
    )
    parser.add_argument("--tui", action="store_true", help="Render a table instead of JSON.")
    parser.add_argument("--log-level", default=None, help="Console log level (default from config).")
    parser.add_argument("--config-dir", default=None, help="Directory holding runtime_config.json.")

    args = parser.parse_args(argv)

    try:
        config = load_config_bundle(config_dir=args.config_dir)
    except (FileNotFoundError, ValueError) as exc:
        _exit_with_error(build_error("Invalid configuration.", details=str(exc)))
    log_level = args.log_level or config["system_config"].get("log_level", "INFO")
    setup_logging(console_level=log_level)
    set_session_id(generate_session_id())

    report_data = analyze_flow(args.file_path, config=config, threshold=args.threshold)

    if "error" in report_data:
        _exit_with_error(report_data)

    if args.tui:
        from .tui_renderer import FlowRenderer

        FlowRenderer(report_data).render()
        return

    print(json.dumps(report_data, indent=2))


if __name__ == "__main__":
    main()
