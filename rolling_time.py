#!/usr/bin/env python3
"""
Convenience wrapper for running RollingTime from a checkout.
For installed usage, prefer: rollingtime or python -m rollingtime
"""

import sys

from rollingtime.cli import main

if __name__ == "__main__":
    sys.exit(main())
