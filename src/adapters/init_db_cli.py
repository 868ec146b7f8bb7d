"""CLI adapter to create the ledger tables.

The schema is created with ``CREATE TABLE IF NOT EXISTS`` semantics, so the
command can be run again safely after an upgrade adds tables.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import create_schema


def main() -> None:
    """Create the ledger schema in the configured database."""
    logger = get_app_logger()
    engine = build_database_adapter().get_ledger_engine()

    tables = create_schema(engine)

    logger.info(f"Ledger schema ready on {engine.url}: {', '.join(tables)}")
    print(f"Created or verified {len(tables)} tables: {', '.join(tables)}.")


if __name__ == "__main__":  # pragma: no cover
    main()
