"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Business-card profile. One column per social platform."""

    __tablename__ = "profiles"
    __table_args__ = (Index("ix_profiles_created_at", "created_at"),)

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    phone: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    instagram: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    whatsapp: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    facebook: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    linkedin: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    website: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    extra_links: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
