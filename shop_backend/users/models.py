from typing import Optional
from pydantic import BaseModel, EmailStr

class UserIn(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    photo: Optional[str] = None
