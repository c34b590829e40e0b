from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Interest(Base):
    """
    A single interest entry.

    The id is assigned by the database on insert and is never reused,
    even after the row is deleted.
    """
    __tablename__ = "interests"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    interest = Column(String, nullable=False)

    def __repr__(self):
        return f"<Interest(id={self.id}, interest='{self.interest}')>"
