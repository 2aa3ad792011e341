import argparse
import json
from pathlib import Path

from bookbuddy.database import catalog_session, engine, ensure_schema
from bookbuddy.schemas import BookSeed
from bookbuddy.services.catalog import upsert_book


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load books into the BookBuddy catalog")
    parser.add_argument("path", type=Path, help="JSON file containing an array of book objects")
    parser.add_argument("--dry-run", action="store_true", help="Validate and roll back instead of committing")
    return parser.parse_args()


def load_seeds(path: Path) -> list[BookSeed]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON array")
    return [BookSeed.model_validate(item) for item in payload]


def main() -> int:
    args = parse_args()
    seeds = load_seeds(args.path)
    ensure_schema(engine)
    created = 0
    updated = 0
    with catalog_session(commit=not args.dry_run) as db:
        for seed in seeds:
            _, was_created = upsert_book(db, seed.model_dump(exclude_none=True))
            if was_created:
                created += 1
            else:
                updated += 1
    print(f"created={created} updated={updated} dry_run={args.dry_run}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
