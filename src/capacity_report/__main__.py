"""Allow running the CLI with ``python -m capacity_report``."""

from capacity_report.cli.main import main

main()
