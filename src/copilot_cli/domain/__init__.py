"""Domain layer for copilot_cli application."""

_SERVICES = {
    "CSVImportService": "copilot_cli.domain.csv_import",
    "TransactionService": "copilot_cli.domain.transaction",
    "SummaryService": "copilot_cli.domain.summary",
}


# Services import the database layer, which imports domain.entities; resolve
# them lazily so importing an entity never pulls the services in.
def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = list(_SERVICES)
