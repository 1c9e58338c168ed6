from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class IntentRequest(BaseModel):
    price: float = Field(gt=0)

class PaymentIn(BaseModel):
    """
    Paiement confirmé côté client (après Stripe.confirmCardPayment).
    L'email du payeur n'est jamais lu depuis le corps: il vient du jeton vérifié.
    """
    model_config = ConfigDict(populate_by_name=True)

    price: float = Field(ge=0)
    cart_items: List[str] = Field(alias="cartItems", min_length=1)
    menu_items: List[str] = Field(default_factory=list, alias="menuItems")
    transaction_id: str = Field(alias="transactionId", min_length=1)
    quantity: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = None
    item_names: Optional[List[str]] = Field(default=None, alias="itemNames")
