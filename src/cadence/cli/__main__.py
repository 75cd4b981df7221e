"""Allow ``python -m cadence.cli``."""

from cadence.cli.main import cli

cli()
