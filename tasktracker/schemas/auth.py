#tasktracker/schemas/auth.py
from pydantic import BaseModel, Field

class Token(BaseModel):
    """
    Token: bearer access token issued on login.
    """
    access_token: str = Field(..., examples=["eyJhbGciOi..."])
    token_type: str = Field("bearer", examples=["bearer"])
    expires_in: int = Field(..., description="Lifetime in seconds", examples=[3600])
