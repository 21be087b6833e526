from fastapi import APIRouter, Depends, status

from ....application.use_cases.login_user import LoginUser
from ....application.use_cases.register_user import RegisterUser
from ....domain.errors import Unauthenticated
from ....infrastructure.db import Store, get_store
from ....infrastructure.metrics import logins_total, user_registrations_total
from ....infrastructure.repositories import UserRepository
from ....infrastructure.security import TokenCodec, get_token_codec
from ..schemas import LoginReq, RegisterReq, RegisterResp, TokenResp, UserResp

router = APIRouter(tags=["auth"])

@router.post("/register", response_model=RegisterResp, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterReq, store: Store = Depends(get_store)):
    with store.session() as db:
        uc = RegisterUser(repo=UserRepository(db))
        user = uc.execute(payload.username, payload.password, payload.role)
    user_registrations_total.inc()
    return RegisterResp(message="Registration successful", data=UserResp.model_validate(user))

@router.post("/login", response_model=TokenResp)
def login(
    payload: LoginReq | None = None,
    store: Store = Depends(get_store),
    codec: TokenCodec = Depends(get_token_codec),
):
    payload = payload or LoginReq()
    with store.session() as db:
        uc = LoginUser(repo=UserRepository(db), tokens=codec)
        try:
            token = uc.execute(payload.username, payload.password)
        except Unauthenticated:
            logins_total.labels(outcome="failure").inc()
            raise
    logins_total.labels(outcome="success").inc()
    return TokenResp(message="Login successful", token=token)
