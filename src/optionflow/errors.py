"""
Error types and helpers for user-facing diagnostics.
"""

from collections.abc import Mapping
from typing import Any, Optional


class TradeParseError(ValueError):
    """Raised when a raw trade record cannot be turned into an OptionTrade."""

    def __init__(self, message: str, *, index: Optional[int] = None, field: Optional[str] = None):
        self.index = index
        self.field = field
        location = []
        if index is not None:
            location.append(f"row {index}")
        if field:
            location.append(f"field '{field}'")
        prefix = f"{', '.join(location)}: " if location else ""
        super().__init__(f"{prefix}{message}")


def build_error(
    error: str,
    *,
    details: Optional[str] = None,
    hint: Optional[str] = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"error": error}
    if details:
        payload["details"] = details
    if hint:
        payload["hint"] = hint
    return payload


def error_lines(payload: Mapping[str, Any]) -> list[str]:
    lines = [f"Error: {payload.get('error') or 'Unknown error.'}"]
    details = payload.get("details")
    if details:
        lines.append(f"Details: {details}")
    hint = payload.get("hint")
    if hint:
        lines.append(f"Hint: {hint}")
    return lines
