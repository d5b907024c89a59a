"""
This code or file is part of 'BatteryReader' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

@author : Aymen Brahim Djelloul
version : 1.0
date    : 18.10.2026
License : MIT

"""

# IMPORTS
import sys
from typing import Optional


class PowerError(Exception):
    """ Uniform error raised for any unreadable or unparsable power supply attribute"""

    kind: str = "power-error"

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.path: Optional[str] = path

    def __str__(self) -> str:
        if self.path is None:
            return f"ERROR : {self.message}"
        return f"ERROR : {self.message} ({self.path})"


class PowerNotFoundError(PowerError):
    """ The attribute file or the power supply directory does not exist"""

    kind: str = "not-found"


class PowerIOError(PowerError):
    """ The file exists but could not be read (permissions, device errors...)"""

    kind: str = "io-failure"


class PowerParseError(PowerError):
    """ The attribute was read but its value is not of the expected type"""

    kind: str = "parse-failure"


if __name__ == "__main__":
    sys.exit()
