"""User model."""

from sqlalchemy import Column, Integer, String

from studyhub.database import Base


class User(Base):
    """Registered site user with a bcrypt password digest."""

    __tablename__ = "user_table"

    user_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    mobile = Column("mobileno", String(32), nullable=False)
    email = Column("emailid", String(255), unique=True, nullable=False, index=True)
    password_hash = Column("password", String(255), nullable=False)
