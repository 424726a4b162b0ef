from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from golden_store.core.auth import hash_password, verify_password
from golden_store.core.errors import BadRequest, Conflict
from golden_store.models import models

MIN_PASSWORD_LENGTH = 6


def get_admin(db: Session, admin_id: str) -> Optional[models.Admin]:
    return db.get(models.Admin, admin_id)


def get_admin_by_username(db: Session, username: str) -> Optional[models.Admin]:
    return db.query(models.Admin).filter(models.Admin.username == username).first()


def authenticate(db: Session, username: str, password: str) -> Optional[models.Admin]:
    admin = get_admin_by_username(db, username)
    if not admin or not verify_password(password, admin.password_hash):
        return None
    return admin


def create_admin(db: Session, username: str, password: str, role: str = "admin") -> models.Admin:
    a = models.Admin(username=username, password_hash=hash_password(password), role=role)
    db.add(a)
    db.commit()
    db.refresh(a)
    return a


def update_profile(db: Session, admin: models.Admin, username: str, password: Optional[str]) -> models.Admin:
    username = username.strip()
    if not username:
        raise BadRequest("Username is required.")

    new_hash = None
    if password:
        password = password.strip()
        if len(password) < MIN_PASSWORD_LENGTH:
            raise BadRequest(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        new_hash = hash_password(password)

    taken = get_admin_by_username(db, username)
    if taken and taken.id != admin.id:
        raise Conflict("Username is already taken.")

    admin.username = username
    if new_hash:
        admin.password_hash = new_hash
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Username is already taken.")
    db.refresh(admin)
    return admin
