#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TWAP From File - Entry Point
============================

Usage:
    python run.py orders.txt
    python run.py orders.txt --log-level DEBUG

Same as `python -m twap_from_file`; see twap_from_file/cli.py for options
and exit codes.
"""

import os
import sys

# Add project to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from twap_from_file.cli import main

if __name__ == '__main__':
    sys.exit(main())
