# This project was developed with assistance from AI tools.
"""CLI entrypoint for demo data seeding.

Usage:
    python -m appdocs.seed          # Seed demo data
    python -m appdocs.seed --force  # Clear and re-seed
"""

import argparse
import json
import sys

from db import SessionLocal, create_tables

from .core.config import settings
from .core.logging import configure_logging
from .services.seed.seeder import seed_demo_data


def main(force: bool = False) -> None:
    """Run demo data seeding."""
    configure_logging(settings.LOG_LEVEL)
    create_tables()
    with SessionLocal() as session:
        result = seed_demo_data(session, force=force)
        print(json.dumps(result, indent=2, default=str))

        if result.get("status") == "already_seeded":
            print("\nDemo data already seeded. Use --force to re-seed.")
            sys.exit(0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo applications")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Clear existing demo data and re-seed",
    )
    args = parser.parse_args()
    main(force=args.force)
