import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.database import db_dependency
from shared.errors import StoreFailure
from .schemas import RegisterIn, LoginIn, AuthOut
from .crud import register_user, authenticate_user
from .security import DEFAULT_ROUNDS

logger = logging.getLogger("auth-service")


def build_router(SessionLocal, bcrypt_rounds: int = DEFAULT_ROUNDS) -> APIRouter:
    router = APIRouter()
    get_db = db_dependency(SessionLocal)

    @router.post("/register", response_model=AuthOut)
    def register(payload: RegisterIn, db: Session = Depends(get_db)):
        try:
            uid = register_user(db, payload.username or "", payload.password or "", rounds=bcrypt_rounds)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to register user")
            raise StoreFailure("Server error")
        return AuthOut(userId=uid)

    @router.post("/login", response_model=AuthOut)
    def login(payload: LoginIn, db: Session = Depends(get_db)):
        try:
            uid = authenticate_user(db, payload.username or "", payload.password or "")
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to look up user for login")
            raise StoreFailure("Server error")
        return AuthOut(userId=uid)

    return router
