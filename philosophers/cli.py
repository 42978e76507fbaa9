"""Command-line entry point for the dining-philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosophers.config import ConfigError, parse_settings
from philosophers.simulation import Simulation

_USAGE_COUNTS = (4, 5)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments and return an exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in _USAGE_COUNTS:
        sys.stderr.write("Wrong argument count\n")
        return 1
    try:
        settings = parse_settings(args)
    except ConfigError as error:
        print(error)
        return 1
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())