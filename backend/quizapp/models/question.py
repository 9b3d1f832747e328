
from sqlalchemy import Column, DateTime, Integer, String, Text

from ..core.database import Base
from ..utils.timezone import utc_now


class Question(Base):
    """A multiple-choice question with four options, global to the system."""
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    option_a = Column(String(500), nullable=False)
    option_b = Column(String(500), nullable=False)
    option_c = Column(String(500), nullable=False)
    option_d = Column(String(500), nullable=False)
    # One of "A", "B", "C", "D"
    correct_answer = Column(String(1), nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)
