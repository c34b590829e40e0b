import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.crud import interest as interest_crud
from app.schemas.interest import INTEREST_NOT_FOUND_DETAIL, InterestRequest, InterestResponse

router = APIRouter(prefix="/interests", tags=["Interests"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=InterestResponse)
def create_interest(
    request: InterestRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new interest. The id is assigned by the store.
    """
    try:
        new_interest = interest_crud.create(db, request.interest)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating interest: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create interest: {str(e)}")

    logger.info(f"Created interest {new_interest.id}: {new_interest.interest}")
    return new_interest


@router.get("", response_model=list[InterestResponse])
def list_interests(db: Session = Depends(get_db)):
    """List every interest, ordered by id."""
    return interest_crud.get_multi(db)


@router.get("/{interest_id}", response_model=InterestResponse)
def get_interest(interest_id: int, db: Session = Depends(get_db)):
    """
    Retrieve an interest by ID.
    """
    db_interest = interest_crud.get_by_id(db, interest_id)

    if not db_interest:
        raise HTTPException(status_code=404, detail=INTEREST_NOT_FOUND_DETAIL)

    return db_interest


@router.put("/{interest_id}", response_model=InterestResponse)
def update_interest(
    interest_id: int,
    request: InterestRequest,
    db: Session = Depends(get_db)
):
    """
    Replace the text of an existing interest. Unknown ids are not created.
    """
    db_interest = interest_crud.update(db, interest_id, request.interest)

    if not db_interest:
        raise HTTPException(status_code=404, detail=INTEREST_NOT_FOUND_DETAIL)

    logger.info(f"Updated interest {interest_id}: {db_interest.interest}")
    return db_interest


@router.delete("/{interest_id}", response_model=InterestResponse)
def delete_interest(interest_id: int, db: Session = Depends(get_db)):
    """
    Delete an interest by ID and return the deleted record.
    """
    deleted = interest_crud.delete(db, interest_id)

    if not deleted:
        raise HTTPException(status_code=404, detail=INTEREST_NOT_FOUND_DETAIL)

    logger.info(f"Deleted interest {interest_id}")
    return deleted
