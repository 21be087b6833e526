from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase): pass


class UserORM(Base):
    __tablename__ = "users"
    # ids are never handed out twice
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return f"UserORM(id={self.id!r}, username={self.username!r}, role={self.role!r})"


class ActivityORM(Base):
    __tablename__ = "activities"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[str] = mapped_column(String(64), nullable=False)

    participants: Mapped[list["ParticipantORM"]] = relationship(
        "ParticipantORM",
        back_populates="activity",
        cascade="all, delete-orphan",
        order_by="ParticipantORM.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"ActivityORM(id={self.id!r}, title={self.title!r})"


class ParticipantORM(Base):
    __tablename__ = "participants"
    __table_args__ = (
        UniqueConstraint("activity_id", "username", name="uq_activity_participant"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    activity_id: Mapped[int] = mapped_column(
        ForeignKey("activities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    username: Mapped[str] = mapped_column(String(255), nullable=False)

    activity: Mapped["ActivityORM"] = relationship("ActivityORM", back_populates="participants")


__all__ = ["Base", "UserORM", "ActivityORM", "ParticipantORM"]
