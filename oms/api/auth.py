"""
Authentication endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from oms.database import get_db
from oms.models.user import User
from oms.security import get_current_user
from oms.services.auth_service import AuthService
from oms.schemas.common import ApiResponse
from oms.schemas.auth import TokenResponse, UserCreate, UserLogin, UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[TokenResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register admin user"
)
def register(data: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new admin user and return an access token
    
    - **name**, **email**, **password**: all required
    """
    return {
        "success": True,
        "message": "Admin user registered successfully",
        "data": AuthService(db).register(data)
    }


@router.post("/login", response_model=ApiResponse[TokenResponse], summary="Log in")
def login(data: UserLogin, db: Session = Depends(get_db)):
    return {"success": True, "message": "Login successful", "data": AuthService(db).login(data)}


@router.get("/profile", response_model=ApiResponse[UserResponse], summary="Current user")
def profile(user: User = Depends(get_current_user)):
    return {"success": True, "data": UserResponse.model_validate(user)}
