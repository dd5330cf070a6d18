"""Property listing service."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.orm import Session

from realty.exceptions import RecordNotFoundError
from realty.models.property import Property
from realty.models.user import User
from realty.schemas.property import PropertyCreate, PropertyUpdate
from realty.services.geocoding import GeocodingService
from realty.services.ownership import delete_owned, list_owned, parse_record_id, update_owned

logger = logging.getLogger(__name__)


class PropertyService:
    """Service for creating, reading and mutating listings.

    Reads are public. Updates and deletes are scoped to the owner.
    """

    def __init__(self, db: Session, geocoder: GeocodingService | None = None):
        self.db = db
        self.geocoder = geocoder or GeocodingService()

    async def create(self, user: User, data: PropertyCreate) -> Property:
        """Geocode the submitted address and persist a listing owned by ``user``.

        If geocoding fails nothing is written.
        """
        location = await self.geocoder.geocode(data.address)

        listing = Property(
            **data.model_dump(exclude={"address"}),
            address=location.address,
            lat=location.lat,
            long=location.long,
            owner_id=user.id,
            posted_on=datetime.now(UTC),
        )
        self.db.add(listing)
        self.db.commit()
        self.db.refresh(listing)

        logger.info(f"User {user.id} created property {listing.id}")
        return listing

    def list_all(self) -> list[Property]:
        """Return every listing, oldest first."""
        return self.db.query(Property).order_by(Property.posted_on).all()

    def list_mine(self, user: User) -> list[Property]:
        """Return the user's own listings, oldest first."""
        return list_owned(self.db, Property, user, Property.posted_on)

    def get_by_id(self, raw_id: str | UUID) -> Property:
        record_id = parse_record_id(raw_id)
        listing = self.db.query(Property).filter(Property.id == record_id).first()
        if listing is None:
            raise RecordNotFoundError(raw_id)
        return listing

    async def update(self, user: User, raw_id: str | UUID, data: PropertyUpdate) -> Property:
        """Apply the submitted fields to the user's listing.

        A new address is re-geocoded and replaces address, lat and long. When
        the address is absent the stored location is left as it is.
        """
        record_id = parse_record_id(raw_id)
        values = data.model_dump(exclude_unset=True)

        if "address" in values:
            location = await self.geocoder.geocode(values["address"])
            values.update(address=location.address, lat=location.lat, long=location.long)

        listing = update_owned(self.db, Property, record_id, user, values)
        logger.info(f"User {user.id} updated property {listing.id}: {sorted(values)}")
        return listing

    def remove(self, user: User, raw_id: str | UUID) -> Property:
        listing = delete_owned(self.db, Property, parse_record_id(raw_id), user)
        logger.info(f"User {user.id} deleted property {listing.id}")
        return listing
