import pytest

from vocabcards.srs import database
from vocabcards.srs.card_state import Card
from vocabcards.srs.constants import CardStatus


T0 = 1_700_000_000_000  # Fixed "now" in ms; tests never read the clock


@pytest.fixture
def make_card():
    """Factory for cards with sensible defaults; override any field."""
    def _make(card_id="c1", **overrides):
        fields = dict(
            id=card_id,
            english="apple",
            vietnamese="quả táo",
            created_at=T0,
            next_review=T0,
            status=CardStatus.NEW,
        )
        fields.update(overrides)
        return Card(**fields)
    return _make


@pytest.fixture
def card_db(monkeypatch):
    """Fresh in-memory SQLite card database."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("TEST_MODE", "false")
    database.dispose_engine()
    database.init_db()
    yield database
    database.dispose_engine()
