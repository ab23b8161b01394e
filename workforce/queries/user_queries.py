# workforce/queries/user_queries.py
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from workforce.models import User, UserRole


def create_user(db: Session, email: str, password_hash: str, role: UserRole) -> User:
    now = datetime.utcnow()
    user = User(email=email, password_hash=password_hash, role=role, created_at=now, updated_at=now)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def user_exists_by_email(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def user_exists_by_id(db: Session, user_id: int) -> bool:
    return db.query(User.id).filter(User.id == user_id).first() is not None
