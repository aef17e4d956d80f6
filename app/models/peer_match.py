from sqlalchemy import Column, Integer, ForeignKey, JSON, Enum, Uuid
from sqlalchemy.dialects.postgresql import JSONB
import enum
from .base import BaseModel


class PeerMatchStatus(enum.Enum):
    PENDING = "pending"
    CONNECTED = "connected"
    DECLINED = "declined"


class PeerMatch(BaseModel):
    __tablename__ = "peer_matches"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    matched_user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    compatibility = Column(Integer, nullable=True)  # percentage
    subjects = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)  # common subjects
    status = Column(
        Enum(
            PeerMatchStatus,
            name="peer_match_status",
            values_callable=lambda x: [e.value for e in x]
        ),
        default=PeerMatchStatus.PENDING,
        nullable=False
    )
