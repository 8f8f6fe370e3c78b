from __future__ import annotations

import importlib.util
from pathlib import Path

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

from lawnboss.models import Base

EXPECTED_TABLES = {
    "customers",
    "properties",
    "technicians",
    "crews",
    "crew_members",
    "crew_assignments",
    "service_types",
    "service_schedules",
    "tax_configurations",
    "invoices",
    "invoice_items",
    "estimates",
    "estimate_items",
    "messages",
    "message_recipients",
}

MIGRATION_PATH = Path(__file__).resolve().parents[3] / "migrations" / "versions" / "20261019_0001_baseline_schema.py"


def _load_migration():
    spec = importlib.util.spec_from_file_location("baseline_schema", MIGRATION_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_model_metadata_contains_target_tables():
    assert EXPECTED_TABLES == set(Base.metadata.tables.keys())


def test_baseline_migration_matches_models():
    migration = _load_migration()
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        context = MigrationContext.configure(conn)
        with Operations.context(context):
            migration.upgrade()
        assert set(inspect(conn).get_table_names()) == EXPECTED_TABLES

        with Operations.context(context):
            migration.downgrade()
        assert inspect(conn).get_table_names() == []


def test_seed_reference_data_is_idempotent(db_session):
    from lawnboss.database.seed import seed_reference_data
    from lawnboss.models import ServiceType, TaxConfiguration, Technician

    first = seed_reference_data(db_session)
    second = seed_reference_data(db_session)

    assert first == {"service_types": 9, "technicians": 4, "tax_configurations": 1}
    assert second == {"service_types": 0, "technicians": 0, "tax_configurations": 0}
    assert db_session.query(ServiceType).filter(ServiceType.name == "Mulch Installation").one().unit_type == "per_yard"
    assert db_session.query(Technician).count() == 4
    assert db_session.query(TaxConfiguration).one().rate == 0.07
