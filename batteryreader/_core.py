"""
This code or file is part of 'BatteryReader' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

@author: Aymen Brahim Djelloul
version: 1.0
date: 18.10.2026
License: MIT

"""

# IMPORTS
import re
import sys
import math
from datetime import timedelta
from typing import Optional


class _Const:

    # DECLARE GLOBAL VARIABLES
    POWER_SUPPLY_PATH: str = "/sys/class/power_supply"
    BATTERY_TYPE: str = "Battery"

    # Shown when the runtime can not be estimated (no draw, no batteries)
    UNKNOWN_RUNTIME: str = "unknown"

    # 'capacity' is stored as a signed 8-bit percentage
    INT8_RANGE: tuple[int, int] = (-128, 127)


_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _dev_print(message: str) -> None:
    """ This function will print a development trace line on stderr"""
    print(f"[DEV] {message}", file=sys.stderr)


def _parse_string(token: str) -> str:
    """ Strings always parse"""
    return token


def _parse_int8(token: str) -> int:
    """
    Parse a signed 8-bit integer token.

    Raises:
        ValueError: if the token is not a plain decimal integer or does not fit in 8 bits
    """
    if not _INT_PATTERN.fullmatch(token):
        raise ValueError(f"invalid digit found in '{token}'")

    value = int(token)
    low, high = _Const.INT8_RANGE
    if not low <= value <= high:
        raise ValueError(f"number '{token}' out of range for an 8-bit integer")

    return value


def _parse_float(token: str) -> float:
    """
    Parse a floating point token.

    float() silently accepts surrounding whitespace, digit separators and non-ASCII
    digits, those are rejected here so that only trailing whitespace is tolerated.
    """
    if not token or not token.isascii() or token[0].isspace() or "_" in token:
        raise ValueError(f"invalid float literal '{token}'")

    return float(token)


def _hours_to_timedelta(hours: float) -> timedelta:
    """ Convert fractional hours to a timedelta, truncated to whole milliseconds"""
    runtime_ms: float = hours * 60 * 60 * 1000
    return timedelta(milliseconds=int(runtime_ms))


def format_runtime(hours: Optional[float]) -> str:
    """
    Format a runtime in hours as '<H>h<M>m'.

    Minutes and seconds are truncated, never rounded. A missing, non-finite or
    negative estimate is reported as 'unknown', and so is one too large for a timedelta.
    """
    if hours is None or not math.isfinite(hours) or hours < 0:
        return _Const.UNKNOWN_RUNTIME

    try:
        seconds = int(_hours_to_timedelta(hours).total_seconds())
    except OverflowError:
        return _Const.UNKNOWN_RUNTIME

    hours_part, seconds = divmod(seconds, 3600)
    minutes = seconds // 60

    return f"{hours_part}h{minutes}m"


if __name__ == "__main__":
    sys.exit()
