"""
This code or file is part of 'BatteryReader' project
copyright (c) 2023-2025 , Aymen Brahim Djelloul, All rights reserved.
use of this source code is governed by MIT License that can be found on the project folder.

@_AUTHOR : Aymen Brahim Djelloul
VERSION : 1.0
date : 18.10.2026
License : MIT License

"""

# IMPORTS
import sys
from batteryreader.cli import main

if __name__ == "__main__":
    sys.exit(main())
