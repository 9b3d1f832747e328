
from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from ..core.database import Base
from ..utils.timezone import utc_now


class Result(Base):
    """One quiz attempt. Written once, never updated."""
    __tablename__ = "results"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    score = Column(Integer, nullable=False)
    total = Column(Integer, nullable=False)
    percentage = Column(Integer, nullable=False)
    # Submitted answers as given: [{"questionId": ..., "answer": ...}, ...]
    # Question ids are not foreign keys so deleting a question keeps history intact
    answers = Column(JSON, nullable=False, default=list)
    timestamp = Column(DateTime, default=utc_now, index=True, nullable=False)

    user = relationship("User", back_populates="results")
