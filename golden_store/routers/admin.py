from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from golden_store.bootstrap import ensure_bootstrap
from golden_store.core.auth import create_access_token, get_current_admin
from golden_store.core.database import get_db, require_online
from golden_store.core.errors import NotFound
from golden_store.crud import admins as crud
from golden_store.schemas import AdminOut, ProfileUpdate, TokenOut

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_online), Depends(ensure_bootstrap)])


def _load_admin(db: Session, claims: Dict[str, Any]):
    admin = crud.get_admin(db, claims["sub"])
    if admin is None:
        raise NotFound("Admin not found.")
    return admin


@router.get("/me", response_model=AdminOut)
def me(claims: Dict[str, Any] = Depends(get_current_admin), db: Session = Depends(get_db)):
    return _load_admin(db, claims)


@router.put("/me", response_model=TokenOut)
def update_me(b: ProfileUpdate, claims: Dict[str, Any] = Depends(get_current_admin), db: Session = Depends(get_db)):
    admin = _load_admin(db, claims)
    admin = crud.update_profile(db, admin, b.username, b.password)
    # username is a claim, so the old token is stale
    return {"token": create_access_token(admin), "user": admin}
