from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

class CartItemIn(BaseModel):
    # Le front envoie menuItemId (camelCase); on stocke menu_item_id
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    menu_item_id: str = Field(alias="menuItemId", min_length=1)
    price: float = Field(ge=0)
    name: Optional[str] = None
    image: Optional[str] = None
