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
from ._batteryreader import (PowerSupply, battery_report, combined_runtime, discover_batteries,
                             discover_power_supplies, VERSION, _AUTHOR, _CAPTION)
from ._core import format_runtime
from ._exceptions import PowerError, PowerNotFoundError, PowerIOError, PowerParseError

__all__ = ['PowerSupply', 'battery_report', 'combined_runtime', 'discover_batteries', 'discover_power_supplies',
           'format_runtime', 'PowerError', 'PowerNotFoundError', 'PowerIOError', 'PowerParseError',
           'VERSION', '_AUTHOR', '_CAPTION']
