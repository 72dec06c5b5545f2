"""SQLAlchemy models for the proposal store."""

from sqlalchemy import TIMESTAMP, Column, Integer, Text, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Proposal(Base):
    """Proposal submitted by a user."""

    __tablename__ = "proposals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    approve = Column(Integer, nullable=False, default=0, server_default="0")
    reject = Column(Integer, nullable=False, default=0, server_default="0")
    # "pass" is a Python keyword
    pass_ = Column("pass", Integer, nullable=False, default=0, server_default="0")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<Proposal id={self.id} title={self.title!r}>"
