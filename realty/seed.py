"""Demo and fixture data: two users, each with a token, a todo and a listing."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from realty.models import Property, Todo, User
from realty.services.auth import issue_token, set_password

DEMO_USERS = [
    ("vova@example.com", "userOnePass"),
    ("lipu@example.com", "userTwoPass"),
]


@dataclass
class SeedData:
    """Everything created by ``seed_demo_data``, index-aligned per user."""

    users: list[User] = field(default_factory=list)
    passwords: list[str] = field(default_factory=list)
    tokens: list[str] = field(default_factory=list)
    todos: list[Todo] = field(default_factory=list)
    properties: list[Property] = field(default_factory=list)


def seed_demo_data(session: Session) -> SeedData:
    """Insert the demo rows into ``session`` and commit."""
    seed = SeedData()

    for email, password in DEMO_USERS:
        user = User(email=email)
        set_password(user, password)
        session.add(user)
        session.flush()
        seed.users.append(user)
        seed.passwords.append(password)

    # issue_token commits
    for user in seed.users:
        seed.tokens.append(issue_token(session, user))

    user_one, user_two = seed.users
    now = datetime.now(UTC)

    seed.todos = [
        Todo(text="First test todo", owner_id=user_one.id),
        Todo(
            text="Second test todo",
            completed=True,
            completed_at=now - timedelta(hours=1),
            owner_id=user_two.id,
        ),
    ]
    seed.properties = [
        Property(
            title="Residence 1",
            address="1451 Main St #2, Santa Clara, CA 95050, USA",
            lat=37.3541,
            long=-121.9552,
            price=3300,
            beds=3,
            baths=2,
            sqft=1050,
            built=2005,
            lot=1200,
            description="nice location",
            for_rent=True,
            for_sale=False,
            posted_on=now - timedelta(days=2),
            owner_id=user_one.id,
        ),
        Property(
            title="Property 2",
            address="24077 Dover Ln, Hayward, CA 94541, USA",
            lat=37.6688,
            long=-122.0808,
            price=2400,
            beds=2,
            baths=2.5,
            sqft=1210,
            built=1978,
            description="on top of the hill",
            for_rent=True,
            for_sale=False,
            posted_on=now - timedelta(days=1),
            owner_id=user_two.id,
        ),
    ]
    session.add_all(seed.todos + seed.properties)
    session.commit()

    for record in seed.users + seed.todos + seed.properties:
        session.refresh(record)

    return seed
