"""
This code or file is part of 'BatteryReader' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

@_AUTHOR : Aymen Brahim Djelloul
VERSION : 1.0
date    : 18.10.2026
License : MIT License

"""

# IMPORTS
import os
import sys
from typing import Callable, Iterable, List, Optional, TypeVar

from ._core import _Const, _dev_print, _parse_float, _parse_int8, _parse_string, format_runtime
from ._exceptions import PowerIOError, PowerNotFoundError, PowerParseError


# Declare software constants
VERSION: str = "1.0"
_AUTHOR: str = "Aymen Brahim Djelloul"
_CAPTION: str = f"BatteryReader - v{VERSION}"

_T = TypeVar("_T")


class PowerSupply:
    """
    One entry of the Linux power supply class (/sys/class/power_supply/<name>).

    Every attribute is a separate single-line file inside the entry directory.
    Nothing is cached, each read opens the file again so values may change between calls.
    """

    def __init__(self, path: str, dev_mode: bool = False) -> None:
        self._path: str = path
        self._dev_mode: bool = dev_mode

    def __repr__(self) -> str:
        return f"PowerSupply({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PowerSupply):
            return NotImplemented
        return self._path == other._path

    @property
    def name(self) -> str:
        """ The entry name, e.g. 'BAT0' or 'AC'"""
        return os.path.basename(os.path.normpath(self._path))

    def _read_prop(self, prop_name: str, parser: Callable[[str], _T]) -> _T:
        """
        Read a property file and parse its content

        Args:
            prop_name: Name of the property file to read
            parser: Callable turning the trimmed text into the typed value

        Returns:
            The parsed value

        Raises:
            PowerNotFoundError: the property file does not exist
            PowerIOError: the property file could not be read
            PowerParseError: the content could not be parsed
        """
        prop_path = os.path.join(self._path, prop_name)

        try:
            with open(prop_path, "r", encoding="utf-8") as f:
                content = f.read()

        except FileNotFoundError as e:
            if self._dev_mode:
                _dev_print(f"_read_prop({prop_name}): {prop_path} not found")
            raise PowerNotFoundError(f"can't find '{prop_name}': {e.strerror}", prop_path) from e

        except (OSError, UnicodeDecodeError) as e:
            if self._dev_mode:
                _dev_print(f"_read_prop({prop_name}): failed to read {prop_path}: {e}")
            raise PowerIOError(f"can't read '{prop_name}': {e}", prop_path) from e

        # Only trailing whitespace is stripped
        token = content.rstrip()

        try:
            value = parser(token)

        except ValueError as e:
            if self._dev_mode:
                _dev_print(f"_read_prop({prop_name}): can't parse '{token}' from {prop_path}")
            raise PowerParseError(f"can't parse '{prop_name}': {e}", prop_path) from e

        if self._dev_mode:
            _dev_print(f"_read_prop({prop_name}): Read '{value}' from {prop_path}")

        return value

    def read_string(self, prop_name: str) -> str:
        return self._read_prop(prop_name, _parse_string)

    def read_int(self, prop_name: str) -> int:
        return self._read_prop(prop_name, _parse_int8)

    def read_float(self, prop_name: str) -> float:
        return self._read_prop(prop_name, _parse_float)

    def is_battery(self) -> bool:
        """ Check if this power supply is a battery ('type' is exactly 'Battery')"""
        return self.read_string("type") == _Const.BATTERY_TYPE

    def percent(self) -> int:
        """ Get the battery charge percentage"""
        return self.read_int("capacity")

    def status(self) -> str:
        """ Get the charging status, e.g. 'Charging', 'Discharging' or 'Full'"""
        return self.read_string("status")

    def energy_now(self) -> float:
        """ Get the remaining energy in µWh"""
        return self.read_float("energy_now")

    def power_now(self) -> float:
        """ Get the instantaneous draw (or charge) rate in µW"""
        return self.read_float("power_now")


def discover_power_supplies(root: str = _Const.POWER_SUPPLY_PATH, dev_mode: bool = False) -> List[PowerSupply]:
    """
    List every entry under the power supply root

    Raises:
        PowerError: if the root directory can not be listed
    """
    try:
        names = sorted(os.listdir(root))

    except FileNotFoundError as e:
        raise PowerNotFoundError(f"can't list power supplies: {e.strerror}", root) from e

    except OSError as e:
        raise PowerIOError(f"can't list power supplies: {e}", root) from e

    if dev_mode:
        _dev_print(f"discover_power_supplies({root}): found {names}")

    return [PowerSupply(os.path.join(root, name), dev_mode=dev_mode) for name in names]


def discover_batteries(root: str = _Const.POWER_SUPPLY_PATH, dev_mode: bool = False) -> List[PowerSupply]:
    """
    Discover the power supplies of type 'Battery'

    An entry whose type can't be read aborts the discovery with a PowerError
    instead of being skipped.
    """
    batteries = [supply for supply in discover_power_supplies(root, dev_mode) if supply.is_battery()]

    if dev_mode:
        _dev_print(f"discover_batteries({root}): {[battery.name for battery in batteries]}")

    return batteries


def combined_runtime(batteries: Iterable[PowerSupply], dev_mode: bool = False) -> Optional[float]:
    """
    Estimate the remaining runtime in hours of all batteries together

    Returns:
        total energy_now / total power_now, or None when the total draw is zero
        (this includes having no battery at all)
    """
    batteries = list(batteries)

    total_energy: float = sum(battery.energy_now() for battery in batteries)  # µW*h
    total_power: float = sum(battery.power_now() for battery in batteries)  # µW*h/h

    if dev_mode:
        _dev_print(f"combined_runtime: energy={total_energy} µWh, power={total_power} µW")

    if total_power == 0:
        return None

    return total_energy / total_power


def battery_report(root: str = _Const.POWER_SUPPLY_PATH, dev_mode: bool = False) -> List[str]:
    """
    Build the report lines: one per battery followed by the runtime estimate.

    Every line is built before being returned so a failing read never yields a partial report.
    """
    batteries = discover_batteries(root, dev_mode)

    lines: List[str] = [f"{battery.name}: {battery.percent()}% ({battery.status()})" for battery in batteries]
    runtime = format_runtime(combined_runtime(batteries, dev_mode))
    lines.append(f"Estimated runtime (all batteries): {runtime}")

    return lines


if __name__ == "__main__":
    sys.exit(0)
