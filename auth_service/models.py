from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from shared.database import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # bcrypt hash; the column keeps its historical name
    password_hash: Mapped[str] = mapped_column("password", String(255), nullable=False)
