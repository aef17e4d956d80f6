from sqlalchemy import Column, String, Integer, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship
from .base import BaseModel


class Idea(BaseModel):
    __tablename__ = "ideas"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    likes = Column(Integer, default=0, server_default="0", nullable=False)

    user = relationship("User", back_populates="ideas")
