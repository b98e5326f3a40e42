"""fsadmin CLI - cluster administration reports."""

import typer

from capacity_report.cli.report import report_app

app = typer.Typer(
    name="fsadmin",
    help="Cluster administration reports",
    no_args_is_help=True,
)

# Add command groups
app.add_typer(report_app, name="report")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
