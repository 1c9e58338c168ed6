from typing import Optional
from pydantic import BaseModel, Field

class MenuItemIn(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(ge=0)
    recipe: Optional[str] = None
    image: Optional[str] = None
