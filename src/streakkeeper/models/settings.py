"""Application-level settings stored in the database."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


class AppSetting(SQLModel, table=True):
    """Key-value storage for the habit snapshot and UI preferences."""

    __tablename__: ClassVar[str] = "app_setting"

    key: str = Field(primary_key=True, max_length=64)
    # Snapshots outgrow a VARCHAR quickly.
    value: str = Field(sa_column=Column(Text, nullable=False))
    description: Optional[str] = Field(default=None, max_length=255)
