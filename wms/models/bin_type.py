"""BinType ORM — capacity template for bins.

Invariants:
    - max_weight in kg, max_volume in cubic meters
    - dimensions JSON: {length, width, height}
"""

from sqlalchemy import Float, ForeignKey, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from wms.db.base import Base


class BinType(Base):
    __tablename__ = "bin_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    max_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    max_volume: Mapped[float | None] = mapped_column(Float, nullable=True)
    dimensions: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    organization_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("organizations.id"), nullable=False, index=True,
    )
