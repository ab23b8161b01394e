import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from workforce.config import Settings
from workforce.database import get_db
from workforce.schemas import AuthResult, UserLogin, UserRegister
from workforce.services import auth_service
from workforce.utils.auth import get_settings
from workforce.utils.errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: UserRegister, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    """Create an employee account and return it with a signed token"""
    # Public sign-up never grants admin; admins come from seeding
    try:
        result = auth_service.register(db, settings, body.email, body.password)
    except ConflictError as e:
        raise ValidationError(e.message)

    return {
        "success": True,
        "message": "User registered successfully",
        "data": AuthResult.model_validate(result),
    }


@router.post("/login")
def login(body: UserLogin, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    result = auth_service.login(db, settings, body.email, body.password)
    return {
        "success": True,
        "message": "Login successful",
        "data": AuthResult.model_validate(result),
    }
