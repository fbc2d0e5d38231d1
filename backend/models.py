"""
ORM data carriers.

Plain row classes with no behaviour. Conversion to and from domain objects
lives in repositories.mappers so the domain layer never sees these classes.
Identifiers are stored as 36-character UUID strings.
"""

from sqlalchemy import Column, String, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship

from database import Base


class UserRecord(Base):
    __tablename__ = 'domain_users'

    id = Column(String(36), primary_key=True)
    email = Column(String, nullable=False)


class PackingListRecord(Base):
    __tablename__ = 'packing_lists'

    id = Column(String(36), primary_key=True)
    name = Column(String, nullable=False)
    user_id = Column(String(36), nullable=False)  # Reference to domain_users.id, deliberately not a foreign key

    items = relationship(
        "ItemRecord",
        back_populates="packing_list",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index('idx_packing_lists_user_id', 'user_id'),
    )


class ItemRecord(Base):
    __tablename__ = 'items'

    id = Column(String(36), primary_key=True)
    name = Column(String, nullable=False)
    is_packed = Column(Boolean, nullable=False, default=False)
    packing_list_id = Column(
        String(36),
        ForeignKey('packing_lists.id', ondelete='CASCADE'),
        nullable=False,
    )

    packing_list = relationship("PackingListRecord", back_populates="items")

    __table_args__ = (
        Index('idx_items_packing_list_id', 'packing_list_id'),
    )


class IdentityAccountRecord(Base):
    """
    Authentication identity for a registered user.

    Shares its id with the matching UserRecord. Credentials are handled
    outside this application.
    """
    __tablename__ = 'identity_accounts'

    id = Column(String(36), primary_key=True)
    email = Column(String, nullable=False)
    normalized_email = Column(String, nullable=False, unique=True)
