from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from golden_store.bootstrap import ensure_bootstrap
from golden_store.core.auth import create_access_token
from golden_store.core.database import get_db, require_online
from golden_store.core.errors import BadRequest, Unauthorized
from golden_store.crud import admins as crud
from golden_store.schemas import LoginBody, TokenOut

router = APIRouter(prefix="/api/auth", tags=["auth"], dependencies=[Depends(require_online), Depends(ensure_bootstrap)])


@router.post("/login", response_model=TokenOut)
def login(b: LoginBody, db: Session = Depends(get_db)):
    username = b.username.strip()
    if not username or not b.password:
        raise BadRequest("Username and password are required.")
    admin = crud.authenticate(db, username, b.password)
    if admin is None:
        raise Unauthorized("Invalid username or password.")
    return {"token": create_access_token(admin), "user": admin}
