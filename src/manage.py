"""Reviews database management CLI.

Creates and drops the database schema of the reviews domain and loads
sample reviews.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load sample reviews into an empty store
"""

import argparse
import sys


def setup_database():
    """Create the reviews database schema."""
    from reviews.domain import reviews
    from reviews.utils.db import setup_db

    print("Initializing reviews domain...")
    reviews.init()
    print("Creating reviews database schema...")
    setup_db(reviews)
    print("Done.")


def drop_database():
    """Drop the reviews database schema."""
    from reviews.domain import reviews
    from reviews.utils.db import drop_db

    print("Initializing reviews domain...")
    reviews.init()
    print("Dropping reviews database schema...")
    drop_db(reviews)
    print("Done.")


def seed_database():
    """Load sample reviews through the command pipeline."""
    from reviews.domain import reviews
    from reviews.utils.seed import seed_reviews

    reviews.init()
    with reviews.domain_context():
        created = seed_reviews()
    print(f"Seeded {len(created)} review(s).")


def main():
    parser = argparse.ArgumentParser(description="Reviews database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load sample reviews into an empty store")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
