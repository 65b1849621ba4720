import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.errors import Conflict, InvalidCredentials, InvalidInput
from .models import User
from .security import DEFAULT_ROUNDS, hash_password, password_too_long, verify_password

logger = logging.getLogger("auth-service")

INVALID_LOGIN = "Invalid username or password"


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def register_user(db: Session, username: str, password: str, rounds: int = DEFAULT_ROUNDS) -> int:
    """
    Create a user and return its id.
    The password is hashed before anything touches the database.
    """
    if not username or not password:
        raise InvalidInput("Username and password required")
    if password_too_long(password):
        raise InvalidInput("Password too long (max 72 bytes for bcrypt).")

    if get_user_by_username(db, username):
        raise Conflict("User already exists")

    u = User(username=username, password_hash=hash_password(password, rounds))
    db.add(u)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent registration of the same name
        db.rollback()
        raise Conflict("User already exists")
    db.refresh(u)

    logger.info("Registered user id=%s", u.id)
    return u.id


def authenticate_user(db: Session, username: str, password: str) -> int:
    """
    Return the user id for valid credentials.
    Unknown usernames and wrong passwords raise the same error.
    """
    if not username or not password:
        raise InvalidInput("Username and password required")

    u = get_user_by_username(db, username)
    if not u or not verify_password(password, u.password_hash):
        raise InvalidCredentials(INVALID_LOGIN)
    return u.id
