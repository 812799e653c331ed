#!/usr/bin/env python3
"""
Entry point for running as module: python -m travis_job
"""

import sys

from travis_job.app import main


if __name__ == "__main__":
    sys.exit(main())
