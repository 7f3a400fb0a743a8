"""Role ORM — named permission set with a scope tag.

Invariants:
    - permissions is an ordered list of exact permission strings ("all" = wildcard)
    - scope is one of RoleScope values
"""

from sqlalchemy import Integer, String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from wms.core.domain_types import RoleScope
from wms.db.base import Base


class Role(Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    permissions: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    scope: Mapped[str] = mapped_column(
        String(20), nullable=False, default=RoleScope.ORGANIZATION.value,
    )
