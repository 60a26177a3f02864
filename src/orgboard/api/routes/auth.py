"""Registration and login routes (public)."""

from fastapi import APIRouter

from orgboard.dependencies import DBSession
from orgboard.models.user import LoginResponse, OrgRegistration, RegistrationResponse, UserLogin
from orgboard.services import auth_service

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register-org", response_model=RegistrationResponse, status_code=201)
async def register_org(body: OrgRegistration, db: DBSession):
    return await auth_service.register_organization(db, body)


@router.post("/login", response_model=LoginResponse)
async def login(body: UserLogin, db: DBSession):
    return await auth_service.login(db, body)
