from passlib.context import CryptContext
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import List, Optional
from dotenv import load_dotenv
import os

# Load environment variables
load_dotenv()

# Security settings
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)
SECRET_KEY = os.getenv("SECRET_KEY") or os.getenv("JWT_SECRET", "secret_key")
# Retired signing keys, still accepted when verifying tokens issued before a rotation
PREVIOUS_SECRET_KEYS: List[str] = [k.strip() for k in os.getenv("PREVIOUS_SECRET_KEYS", "").split(",") if k.strip()]
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Password hashing and verification
def hash_password(password: str) -> str:
    """Hash a password with automatic truncation for bcrypt"""
    # Bcrypt has a 72 byte limit, truncate if needed
    if len(password) > 72:
        password = password[:72]
    return pwd_context.hash(password)

# Password verification
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash"""
    # Apply same truncation for consistency
    if len(plain_password) > 72:
        plain_password = plain_password[:72]
    return pwd_context.verify(plain_password, hashed_password)

# JWT token creation and decoding
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

# JWT token decoding
def decode_token(token: str) -> Optional[dict]:
    """Decode with the current key first, then any retired keys"""
    for key in [SECRET_KEY, *PREVIOUS_SECRET_KEYS]:
        try:
            return jwt.decode(token, key, algorithms=[ALGORITHM])
        except JWTError:
            continue
    return None
