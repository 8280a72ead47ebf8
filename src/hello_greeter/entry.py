"""Entry point for the installed ``hello-greeter`` console script.

Lives outside ``adapters`` so it may import the composition root and hand
``build_production`` to the CLI runner.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
