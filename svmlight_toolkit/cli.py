"""Console-script entrypoints.

The tool modules own their argument parsing; these wrappers only turn their
return value into a process exit code.
"""

from __future__ import annotations

import sys


def inspect() -> None:
    from svmlight_toolkit.tools.inspect_cli import main

    sys.exit(main())
