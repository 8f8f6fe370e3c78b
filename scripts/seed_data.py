import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from lawnboss.core.logging_config import configure_logging
from lawnboss.database.db import create_all, get_db_session
from lawnboss.database.seed import seed_reference_data


def main() -> None:
    configure_logging()
    create_all()
    with get_db_session() as db:
        try:
            created = seed_reference_data(db)
        except Exception:
            db.rollback()
            raise
    print(f"Seeded reference data: {created}")


if __name__ == "__main__":
    main()
