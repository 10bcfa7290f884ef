#!/usr/bin/env python3
"""
Entry point for running modularity_dashboard as a module.
"""

import sys

from modularity_dashboard import main

if __name__ == '__main__':
    sys.exit(main())
