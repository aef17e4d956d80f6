from sqlalchemy import Column, String, Boolean, ForeignKey, Text, Uuid, false
from sqlalchemy.orm import relationship
from .base import BaseModel


class Notification(BaseModel):
    __tablename__ = "notifications"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(50), nullable=False, default="general")  # quiz_completed, study_reminder, general
    read = Column(Boolean, default=False, server_default=false(), nullable=False)

    user = relationship("User", back_populates="notifications")
