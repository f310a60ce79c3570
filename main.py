#!/usr/bin/env python3
"""
Wink Render - render an HTML file from a source checkout.

Equivalent to the installed ``wink-render`` command.
"""

import sys

from render_engine.main import main

if __name__ == "__main__":
    sys.exit(main())
