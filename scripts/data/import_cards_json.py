"""
Import cards from a JSON export into the card database.

This script:
1. Reads a JSON export (a bare list of card records, or the app's persisted
   store blob {"state": {"cards": [...]}})
2. Migrates legacy SM-2 style records into the current shape
3. Validates every record
4. Upserts all cards in one transaction

Usage:
    python -m scripts.data.import_cards_json --file exports/cards.json [--dry-run]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from vocabcards import srs
from vocabcards.srs.card_state import card_from_record
from vocabcards.srs.migration import migrate_records


def load_export_file(path: Path) -> list[dict]:
    """
    Read card records from an export file.

    Raises:
        ValueError: if the file holds neither a list nor a store blob
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, list):
        return data

    if isinstance(data, dict):
        state = data.get("state", data)
        cards = state.get("cards") if isinstance(state, dict) else None
        if isinstance(cards, list):
            return cards

    raise ValueError(f"{path} does not contain a list of cards")


def import_cards(path: Path, dry_run: bool = False) -> int:
    """
    Import all cards from `path`.

    Returns:
        Number of cards imported (or that would be imported on a dry run)
    """
    raws = load_export_file(path)
    print(f"Found {len(raws)} card(s) in {path}")

    if dry_run:
        records, migrated = migrate_records(raws)
        if migrated:
            print("Legacy records detected - would be migrated to current format")
        cards = [card_from_record(record) for record in records]
        print(f"\n⚠ DRY RUN MODE - {len(cards)} card(s) validated, nothing saved")
        return len(cards)

    srs.init_db()
    count = srs.import_records(raws)
    print(f"✓ Imported {count} card(s)")
    return count


def main():
    parser = argparse.ArgumentParser(
        description="Import cards from a JSON export"
    )
    parser.add_argument(
        "--file",
        required=True,
        type=Path,
        help="Path to the JSON export"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate only, don't write to the database"
    )

    args = parser.parse_args()
    import_cards(args.file, dry_run=args.dry_run)


if __name__ == "__main__":
    main()
