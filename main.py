#!/usr/bin/env python3
"""Run the benchmark sweeps described by ``config.yaml`` (or ``--config``)."""

import sys

from algobench.cli import main

if __name__ == "__main__":
    sys.exit(main())
