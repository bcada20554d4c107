from sqlalchemy import Column, Integer, Text
from infrastructure.sqlalchemy.session.db import Base


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    description = Column(Text, nullable=False)
    urgent = Column(Integer, nullable=False, default=0)
    private = Column(Integer, nullable=False, default=1)
    deadline = Column(Text, nullable=True)
