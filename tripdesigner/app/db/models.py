"""SQLAlchemy ORM models for the catalog, itineraries, chat and reviews."""

import datetime as dt
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class LocationData(Base):
    """Location table - bookable catalog entries."""

    __tablename__ = "location_data"
    __table_args__ = (Index("idx_location_category", "category"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    price_per_person: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    is_pet_friendly: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class Itinerary(Base):
    """Itinerary table - user-owned trip plans with derived costs."""

    __tablename__ = "itinerary"
    __table_args__ = (Index("idx_itinerary_owner", "owner_user_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_user_id: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    number_of_people: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    number_of_pets: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    total_cost_per_itinerary: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0"), nullable=False
    )
    total_cost_for_all_locations: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0"), nullable=False
    )
    total_cost_for_all_people: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0"), nullable=False
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Links must be loaded explicitly (selectinload) before cost computation
    links: Mapped[list["ItineraryLocation"]] = relationship(
        "ItineraryLocation",
        back_populates="itinerary",
        cascade="all, delete-orphan",
        lazy="raise",
    )


class ItineraryLocation(Base):
    """Join table between itineraries and catalog locations."""

    __tablename__ = "itinerary_location"

    itinerary_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("itinerary.id", ondelete="CASCADE"), primary_key=True
    )
    location_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("location_data.id"), primary_key=True
    )

    # Relationships
    itinerary: Mapped["Itinerary"] = relationship("Itinerary", back_populates="links")
    location: Mapped["LocationData"] = relationship("LocationData", lazy="raise")


class ChatMessage(Base):
    """Chat table - messages between users and the admin."""

    __tablename__ = "chat"
    __table_args__ = (
        Index("idx_chat_sender", "sender_id"),
        Index("idx_chat_recipient", "recipient_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    sender_id: Mapped[str] = mapped_column(Text, nullable=False)
    recipient_id: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class Review(Base):
    """Review table - public trip reviews with an optional image."""

    __tablename__ = "review"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    review_post: Mapped[str] = mapped_column(Text, nullable=False)
    posted_date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    image_path: Mapped[str] = mapped_column(Text, nullable=False)
