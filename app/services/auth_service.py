from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from app.models.user import User
from app.schemas.auth import UserRegister, UserLogin
from app.utils.exceptions import ConflictError, NotFoundError, ValidationError
from app.utils.security import hash_password, verify_password, create_access_token
from datetime import timedelta
import os
import logging

logger = logging.getLogger(__name__)
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))

class AuthService:
    @staticmethod
    def username_from_email(email: str) -> str:
        """Default username: the local part of the email address"""
        return email.split("@")[0]

    @staticmethod
    def register_user(db: Session, user_data: UserRegister) -> User:
        # Check existing email
        existing_user = db.query(User).filter(User.email == user_data.email).first()
        if existing_user:
            raise ConflictError("User with this email already exists.")

        username = AuthService.username_from_email(user_data.email)
        if db.query(User).filter(User.username == username).first():
            raise ConflictError("Username derived from this email is already taken.")

        # Create user
        new_user = User(
            email=user_data.email,
            password_hash=hash_password(user_data.password),
            username=username,
            watchlist=[]
        )
        db.add(new_user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email/username
            db.rollback()
            raise ConflictError("User with this email already exists.")
        db.refresh(new_user)
        logger.info(f"Registered user {new_user.id} ({new_user.username})")
        return new_user


    @staticmethod
    def login_user(db: Session, credentials: UserLogin) -> dict:
        # Find user
        user = db.query(User).filter(User.email == credentials.email).first()

        if not user:
            logger.warning(f"Login failed: User not found with email {credentials.email}")
            raise NotFoundError("User not found.")

        if not verify_password(credentials.password, str(user.password_hash)):
            logger.warning(f"Login failed: Incorrect password for email {credentials.email}")
            raise ValidationError("Invalid credentials.")

        # Create token
        token = create_access_token(
            data={"email": user.email, "id": user.id},
            expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        )

        return {
            "result": {"id": user.id, "email": user.email},
            "token": token
        }
