"""
CRUD operations for Interest model.

Implements the Repository pattern to encapsulate all database operations
for interests, providing a clean interface for the API layer.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.interest import Interest


def create(db: Session, text: str) -> Interest:
    """
    Create a new interest in the database.

    Args:
        db: Database session
        text: Interest text

    Returns:
        Created Interest instance with its assigned id
    """
    db_interest = Interest(interest=text)

    db.add(db_interest)
    db.commit()
    db.refresh(db_interest)

    return db_interest


def get_by_id(db: Session, interest_id: int) -> Optional[Interest]:
    """
    Retrieve an interest by its ID.

    Returns:
        Interest instance if found, None otherwise
    """
    return db.query(Interest).filter(Interest.id == interest_id).first()


def get_multi(db: Session) -> List[Interest]:
    """Retrieve every interest, ordered by id."""
    return db.query(Interest).order_by(Interest.id).all()


def update(db: Session, interest_id: int, text: str) -> Optional[Interest]:
    """
    Replace the text of an existing interest. The id is left untouched.

    Args:
        db: Database session
        interest_id: Interest ID to update
        text: New interest text

    Returns:
        Updated Interest instance if found, None otherwise
    """
    db_interest = get_by_id(db, interest_id)
    if not db_interest:
        return None

    db_interest.interest = text

    db.commit()
    db.refresh(db_interest)

    return db_interest


def delete(db: Session, interest_id: int) -> Optional[Interest]:
    """
    Delete an interest by ID.

    Args:
        db: Database session
        interest_id: Interest ID to delete

    Returns:
        The deleted Interest (detached, attributes still loaded) if found,
        None otherwise
    """
    db_interest = get_by_id(db, interest_id)
    if not db_interest:
        return None

    db.delete(db_interest)
    db.commit()

    return db_interest
