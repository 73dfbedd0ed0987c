"""
Export the card collection to a JSON file.

Records are written in the flat camelCase shape accepted by
scripts.data.import_cards_json.

Usage:
    python -m scripts.data.export_cards_json --file exports/cards.json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from vocabcards import srs


def export_cards(path: Path) -> int:
    """Write all cards to `path` and return how many were written."""
    srs.init_db()
    records = srs.export_records()

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(records, f, ensure_ascii=False, indent=2)

    print(f"✓ Exported {len(records)} card(s) to {path}")
    return len(records)


def main():
    parser = argparse.ArgumentParser(
        description="Export all cards to JSON"
    )
    parser.add_argument(
        "--file",
        required=True,
        type=Path,
        help="Destination JSON file"
    )

    args = parser.parse_args()
    export_cards(args.file)


if __name__ == "__main__":
    main()
