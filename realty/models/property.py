"""Property listing model."""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, String, Text, Uuid

from realty.database import Base
from realty.models.mixins import UUIDPrimaryKeyMixin


class Property(Base, UUIDPrimaryKeyMixin):
    """A property listing.

    ``address``, ``lat`` and ``long`` always come from the geocoder, never from
    the caller.
    """

    __tablename__ = "properties"

    title = Column(String(255), nullable=False)
    address = Column(String(500), nullable=False)
    lat = Column(Float, nullable=False)
    long = Column(Float, nullable=False)
    price = Column(Float, nullable=False)
    beds = Column(Float, nullable=False)
    baths = Column(Float, nullable=False)
    sqft = Column(Float, nullable=False)
    built = Column(Float, nullable=True)
    lot = Column(Float, nullable=True)
    description = Column(Text, nullable=True)
    available = Column(Boolean, nullable=False, default=True)
    for_rent = Column(Boolean, nullable=False, default=False)
    for_sale = Column(Boolean, nullable=False, default=False)
    posted_on = Column(DateTime(timezone=True), nullable=False, index=True)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
