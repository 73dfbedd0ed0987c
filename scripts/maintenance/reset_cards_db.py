"""
Reset the card database.

DANGEROUS: This deletes every card and its review progress!
Only use when you want to start fresh for testing.

Usage:
    python -m scripts.maintenance.reset_cards_db
    python -m scripts.maintenance.reset_cards_db --yes   # skip the prompt
"""

import argparse

from vocabcards import srs


def count_cards() -> int:
    """Number of cards currently stored (creates the table if missing)."""
    srs.init_db()
    return len(srs.load_all_cards())


def reset_cards() -> int:
    """
    Drop and recreate the cards table.

    Returns:
        Number of cards that were deleted
    """
    deleted = count_cards()
    srs.reset_db()
    return deleted


def main():
    parser = argparse.ArgumentParser(description="Delete every card and its scheduling progress")
    parser.add_argument("--yes", action="store_true", help="Reset without asking for confirmation")
    args = parser.parse_args()

    total = count_cards()
    print("=" * 60)
    print("WARNING: Reset Card Database")
    print("=" * 60)
    print(f"\nThe database holds {total} card(s). Resetting deletes their")
    print("words, translations and scheduling progress.\n")

    if total == 0:
        print("Nothing to delete.")
        return

    if not args.yes:
        response = input("Type 'yes' to confirm: ")
        if response.strip().lower() != "yes":
            print("\nCancelled. No changes made.")
            return

    deleted = reset_cards()
    print(f"✓ Deleted {deleted} card(s). The cards table is empty.")


if __name__ == "__main__":
    main()
