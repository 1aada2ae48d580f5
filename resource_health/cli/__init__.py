"""CLI commands: one module per command (seed, report, check-stock, check-budget, validate-config)."""

from typer import Typer

from resource_health.cli import budget, report, seed, stock, validate_config as validate_config_module
from resource_health.utils.tracing import init_tracing

init_tracing()

app = Typer(help="Lab resource health and alerting")


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command()(seed.seed)
    app.command()(report.report)
    app.command(name="check-stock")(stock.check_stock)
    app.command(name="check-budget")(budget.check_budget)
    app.command(name="validate-config")(validate_config_module.validate_config)


register_commands()
