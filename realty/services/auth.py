"""Authentication service for password hashing and the token lifecycle.

A token is valid only while it is both correctly signed and still present in
its owner's ``user_tokens`` rows. Logging out deletes the row, so a revoked
token keeps failing validation even though its signature is fine.
"""

import logging
import uuid
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from realty.config import get_settings
from realty.exceptions import DuplicateEmailError
from realty.models.user import AUTH_ACCESS, User, UserToken

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh random salt."""
    return pwd_context.hash(password)


def set_password(user: User, password: str) -> None:
    """Replace the user's password hash. The plaintext is never stored."""
    user.password_hash = get_password_hash(password)


def create_access_token(user_id: uuid.UUID) -> str:
    """Create a signed auth token for a user."""
    now = datetime.now(UTC)
    to_encode = {
        "sub": str(user_id),
        "access": AUTH_ACCESS,
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expiration_minutes),
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def issue_token(db: Session, user: User) -> str:
    """Sign a new token for the user and append it to their token collection."""
    token = create_access_token(user.id)
    db.add(UserToken(user_id=user.id, access=AUTH_ACCESS, token=token))
    db.commit()
    return token


def validate_token(db: Session, token: str | None) -> User | None:
    """Resolve a token to its user, or None.

    Every failure (bad signature, expiry, wrong purpose, unknown user, revoked
    token) gives the same None; the reason only goes to the debug log.
    """
    if not token:
        return None

    payload = decode_access_token(token)
    if payload is None:
        logger.debug("Rejected token: invalid signature or expired")
        return None

    if payload.get("access") != AUTH_ACCESS:
        logger.debug(f"Rejected token: unexpected access tag {payload.get('access')!r}")
        return None

    try:
        user_id = uuid.UUID(payload.get("sub"))
    except (TypeError, ValueError, AttributeError):
        logger.debug("Rejected token: malformed subject")
        return None

    user = (
        db.query(User)
        .join(UserToken, UserToken.user_id == User.id)
        .filter(
            User.id == user_id,
            UserToken.token == token,
            UserToken.access == AUTH_ACCESS,
        )
        .first()
    )
    if user is None:
        logger.debug(f"Rejected token for user {user_id}: user missing or token revoked")
    return user


def revoke_token(db: Session, user: User, token: str) -> None:
    """Remove a token from the user's collection. Removing an absent token is a no-op."""
    db.execute(
        delete(UserToken).where(UserToken.user_id == user.id, UserToken.token == token),
        execution_options={"synchronize_session": False},
    )
    db.commit()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email.strip().lower()).first()


def create_user(db: Session, email: str, password: str) -> User:
    """Create a new user.

    Uniqueness is enforced by the unique index on ``users.email``; a
    violation surfaces as DuplicateEmailError.
    """
    user = User(email=email.strip().lower())
    set_password(user, password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateEmailError(email) from e
    db.refresh(user)
    return user
