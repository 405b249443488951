"""
Auth Service - registration and login
"""
from sqlalchemy.orm import Session

from oms.errors import ValidationError
from oms.models.user import User
from oms.observability import get_logger
from oms.repositories.user_repository import UserRepository
from oms.schemas.auth import TokenResponse, UserCreate, UserLogin, UserResponse
from oms.security import create_access_token, hash_password, verify_password

logger = get_logger(__name__)


class AuthService:
    
    def __init__(self, db: Session):
        self.repository = UserRepository(db)
    
    def _token_response(self, user: User) -> TokenResponse:
        return TokenResponse(
            token=create_access_token(user),
            user=UserResponse.model_validate(user)
        )
    
    def register(self, data: UserCreate) -> TokenResponse:
        if self.repository.get_by_email(data.email):
            raise ValidationError("User already exists")
        
        user = self.repository.create(User(
            name=data.name.strip(),
            email=data.email,
            hashed_password=hash_password(data.password)
        ))
        logger.info("user_registered", user_id=user.id)
        return self._token_response(user)
    
    def login(self, data: UserLogin) -> TokenResponse:
        user = self.repository.get_by_email(data.email)
        if not user or not verify_password(data.password, user.hashed_password):
            logger.info("login_failed", email=data.email)
            raise ValidationError("Invalid credentials")
        
        logger.info("user_logged_in", user_id=user.id)
        return self._token_response(user)
