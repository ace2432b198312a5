from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from core.setup import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)
    # Stored as given
    password = Column(String, nullable=False)

    study_plans = relationship(
        "StudyPlan", back_populates="user", passive_deletes="all"
    )
