"""
Trade Parser Module

Reads a collected batch of option trade prints and normalizes each record into
an OptionTrade. Field names follow the upstream trade feed.
"""

import json
import sys
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from .errors import TradeParseError
from .models.trade import TIMESTAMP_FORMAT, OptionType

if TYPE_CHECKING:
    from .models.trade import OptionTrade

E = TypeVar("E", bound=Enum)

_MISSING = object()

_OPTION_TYPES = {
    "C": OptionType.CALL,
    "CALL": OptionType.CALL,
    "P": OptionType.PUT,
    "PUT": OptionType.PUT,
}


class TradeParser:
    """
    Loads trade batches exported as JSON.

    Accepts either a bare array of trade records or an object with a
    ``trades`` array (the shape of the upstream trades endpoint).
    """

    @staticmethod
    def load_records(file_path: str) -> list[dict[str, Any]]:
        """
        Read the raw trade records at the given path.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
            TradeParseError: If the document has no trade array.
        """
        try:
            with open(file_path, encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError:
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            raise
        except json.JSONDecodeError as e:
            print(f"Error parsing JSON: {e}", file=sys.stderr)
            raise

        if isinstance(payload, Mapping):
            payload = payload.get("trades")
        if not isinstance(payload, list):
            raise TradeParseError("expected a list of trades or an object with a 'trades' list")
        return payload

    @staticmethod
    def parse_trades(records: list[Mapping[str, Any]]) -> list["OptionTrade"]:
        from .models.trade import OptionTrade

        trades = []
        for index, row in enumerate(records):
            if not isinstance(row, Mapping):
                raise TradeParseError("trade record is not an object", index=index)
            trades.append(OptionTrade.from_row(row, index=index))
        return trades

    @staticmethod
    def parse(file_path: str) -> list["OptionTrade"]:
        return TradeParser.parse_trades(TradeParser.load_records(file_path))


def _value(row: Mapping[str, Any], field: str, index: Optional[int], required: bool) -> Any:
    value = row.get(field, _MISSING)
    if value is _MISSING or value is None or value == "":
        if required:
            raise TradeParseError("missing required value", index=index, field=field)
        return _MISSING
    return value


def parse_str(row: Mapping[str, Any], field: str, *, index: Optional[int] = None) -> str:
    return str(_value(row, field, index, True)).strip()


def parse_float(
    row: Mapping[str, Any], field: str, *, index: Optional[int] = None, required: bool = False
) -> float:
    """Missing optional numbers (the feed sends null for an absent quote) read as 0.0."""
    value = _value(row, field, index, required)
    if value is _MISSING:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise TradeParseError(f"not a number: {value!r}", index=index, field=field) from None


def parse_int(
    row: Mapping[str, Any], field: str, *, index: Optional[int] = None, required: bool = False
) -> int:
    value = _value(row, field, index, required)
    if value is _MISSING:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise TradeParseError(f"not an integer: {value!r}", index=index, field=field) from None


def parse_date(row: Mapping[str, Any], field: str, *, index: Optional[int] = None) -> date:
    value = _value(row, field, index, True)
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise TradeParseError(f"not a YYYY-MM-DD date: {value!r}", index=index, field=field) from None


def parse_timestamp(row: Mapping[str, Any], field: str, *, index: Optional[int] = None) -> str:
    value = str(_value(row, field, index, True)).strip()
    try:
        datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        raise TradeParseError(
            f"not an HH:MM:SS.fff timestamp: {value!r}", index=index, field=field
        ) from None
    return value


def parse_option_type(row: Mapping[str, Any], field: str, *, index: Optional[int] = None) -> OptionType:
    value = str(_value(row, field, index, True)).strip().upper()
    try:
        return _OPTION_TYPES[value]
    except KeyError:
        raise TradeParseError(f"unknown option type: {value!r}", index=index, field=field) from None


def parse_enum(
    row: Mapping[str, Any],
    field: str,
    enum_cls: type[E],
    *,
    index: Optional[int] = None,
    default: Optional[E] = None,
) -> E:
    """
    Resolve a closed enumeration by value, falling back to member name.

    Integer enumerations (condition codes, exchange ids) also accept numeric
    strings. Without a default the field is required.
    """
    value = _value(row, field, index, default is None)
    if value is _MISSING:
        return default

    candidate = value
    if issubclass(enum_cls, IntEnum):
        try:
            candidate = int(value)
        except (TypeError, ValueError):
            raise TradeParseError(f"not a numeric code: {value!r}", index=index, field=field) from None
    try:
        return enum_cls(candidate)
    except ValueError:
        pass

    name = str(value).strip().upper().replace(" ", "_")
    if name in enum_cls.__members__:
        return enum_cls.__members__[name]
    raise TradeParseError(
        f"unknown {enum_cls.__name__} value: {value!r}", index=index, field=field
    )
