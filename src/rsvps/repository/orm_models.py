from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base


class RSVP(Base):
    __tablename__ = TableNames.RSVPS.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    attending: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    guest_count: Mapped[int] = mapped_column("guestCount", Integer, nullable=False, default=1)
    meal: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    allergies: Mapped[str] = mapped_column(Text, nullable=False, default="")
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # ISO-8601 UTC string; lexicographic order is chronological order
    created_at: Mapped[str] = mapped_column("createdAt", String(32), nullable=False, index=True)
    ip: Mapped[str] = mapped_column(String(64), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<RSVP {self.id} {self.name}>"
