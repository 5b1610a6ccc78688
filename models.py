from sqlalchemy import JSON, Column, Float, String

from database import Base


class Transient(Base):
    """Persistent, expiry-bearing cache entry backing the transient store."""

    __tablename__ = "transients"

    name = Column(String(191), primary_key=True)
    value = Column(JSON, nullable=True)
    # Unix timestamp; NULL means the entry never expires.
    expires_at = Column(Float, nullable=True, index=True)

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and self.expires_at <= now
