"""
Rich renderer for flow reports: a summary panel and the spread table.
"""

import argparse
import json
import sys
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

FLOW_THEME = Theme(
    {
        "header": "bold blue",
        "bullish": "bold green",
        "bearish": "bold red",
        "neutral": "bold white",
        "warning": "bold yellow",
        "dim": "dim white",
        "label": "dim cyan",
        "value": "bold white",
    }
)

EXPECTATION_STYLES = {"Bullish": "bullish", "Bearish": "bearish", "Neutral": "neutral"}


class FlowRenderer:
    def __init__(
        self, report: dict[str, Any], *, console: Optional[Console] = None, limit: int = 50
    ):
        self.report = report
        self.console = console or Console(theme=FLOW_THEME)
        self.summary = self.report.get("flow_summary", {})
        self.limit = limit

    def render(self) -> None:
        """Main entry point for TUI rendering."""
        self.render_summary()
        self.render_spreads()

    def render_summary(self) -> None:
        """Dealer positioning and large-trader totals side by side."""
        grid = Table.grid(padding=(0, 4))
        grid.add_column()
        grid.add_column()

        dealer = Text()
        dealer.append("• Dealer Δ:       ", style="label")
        dealer.append(f"{fmt_delta(self.summary.get('dealer_delta'))}\n", style="value")
        dealer.append("• Naive Dealer Δ: ", style="label")
        dealer.append(fmt_delta(self.summary.get("naive_dealer_delta")), style="value")

        expectation = str(self.summary.get("large_trader_expectation", "Neutral"))
        large = Text()
        large.append("• Large Trades:   ", style="label")
        large.append(f"{self.summary.get('large_trade_count', 0)}\n", style="value")
        large.append("• Net Premium:    ", style="label")
        large.append(f"{fmt_currency(self.summary.get('large_trader_net_value'))}\n", style="value")
        large.append("• Opening Δ:      ", style="label")
        large.append(
            f"{fmt_delta(self.summary.get('large_trader_opening_delta'))} ({expectation})",
            style=EXPECTATION_STYLES.get(expectation, "dim"),
        )

        grid.add_row(dealer, large)
        symbol = self.report.get("symbol") or "?"
        self.console.print(
            Panel(
                grid,
                title=f"[header]{symbol} FLOW[/header]",
                border_style="blue",
                box=box.ROUNDED,
                expand=False,
            )
        )

    def render_spreads(self) -> None:
        spreads = sorted(
            self.report.get("spreads", []),
            key=lambda s: abs(float(s.get("net_value", 0.0))),
            reverse=True,
        )
        if not spreads:
            self.console.print("[dim]No spreads reconstructed.[/dim]")
            return

        table = Table(
            box=box.ROUNDED,
            header_style="header",
            border_style="dim",
            padding=(0, 1),
            expand=False,
        )
        table.add_column("Time", width=12)
        table.add_column("Strategy", style="cyan", width=22)
        table.add_column("Type", width=7)
        table.add_column("Net Value", justify="right", width=16)
        table.add_column("Δ Opened", justify="right", width=10)
        table.add_column("Legs", justify="right", width=4)
        table.add_column("Open", width=4)
        table.add_column("Summary")

        for spread in spreads[: self.limit]:
            expectation = str(spread.get("expectation", ""))
            table.add_row(
                str(spread.get("timestamp", "")),
                Text(str(spread.get("spread_name", "")), style=EXPECTATION_STYLES.get(expectation, "")),
                str(spread.get("spread_type", "")),
                fmt_currency(spread.get("net_value")),
                fmt_delta(spread.get("delta_when_opened")),
                str(spread.get("leg_count", "")),
                "Y" if spread.get("opening_trade") else "",
                str(spread.get("summary", "")).rstrip("|").replace("|", "\n"),
            )

        self.console.print(table)
        if len(spreads) > self.limit:
            self.console.print(f"[dim]... {len(spreads) - self.limit} smaller spreads not shown[/dim]")


# --- Formatting Helpers ---


def fmt_currency(val: Optional[float]) -> str:
    if val is None:
        return "$0.00"
    return f"${val:,.2f}"


def fmt_delta(val: Optional[float]) -> str:
    if val is None:
        return "0"
    return f"{val:+,.0f}"


def main() -> None:
    parser = argparse.ArgumentParser(description="optionflow Rich TUI Renderer")
    parser.add_argument("input_file", nargs="?", help="Report JSON file path")
    args = parser.parse_args()

    data = {}
    if args.input_file:
        with open(args.input_file) as f:
            data = json.load(f)
    elif not sys.stdin.isatty():
        data = json.load(sys.stdin)

    if not data:
        return

    FlowRenderer(data).render()


if __name__ == "__main__":
    main()
