"""Console script target; the only place production services meet the CLI."""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run ``hello-world-plus`` with ``sys.argv`` and return its exit status."""
    return run_cli(services_factory=build_production)


__all__ = ["main"]
