"""
SQLAlchemy ORM Models for the card collection

Defines the CardRecordModel table backing the storage collaborator.
Timestamps are stored as ms epoch integers, interval as float days.
"""

from sqlalchemy import JSON, BigInteger, Column, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CardRecordModel(Base):
    """
    Persistent row for a single flashcard, keyed by card id.
    """
    __tablename__ = 'cards'

    id = Column(String(64), primary_key=True, nullable=False)

    # Content (opaque to the scheduler)
    english = Column(Text, nullable=False)
    vietnamese = Column(Text, nullable=False)
    example = Column(Text, nullable=True)
    phonetic = Column(String(255), nullable=True)
    created_at = Column(BigInteger, nullable=False)

    # Scheduling state
    status = Column(String(20), nullable=False)  # new, learning, learned
    interval = Column(Float, nullable=False, default=0.0)  # days
    step_index = Column(Integer, nullable=False, default=0)
    next_review = Column(BigInteger, nullable=False, index=True)
    lapses = Column(Integer, nullable=False, default=0)
    reps = Column(Integer, nullable=False, default=0)
    last_review = Column(BigInteger, nullable=True)

    # Pass-through fields from other collaborators
    extra = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<CardRecordModel({self.id}, {self.english!r}, {self.status})>"
