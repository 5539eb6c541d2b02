"""Allow ``python -m cfs_sim``."""

from cfs_sim.cli import run

run()
