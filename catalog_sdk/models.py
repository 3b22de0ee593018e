# catalog_sdk/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Product(BaseModel):
    # the remote adds fields such as "rating" that we never display
    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    price: float
    category: str
    description: Optional[str] = None
    image: Optional[str] = None


class ProductIn(BaseModel):
    title: str
    price: float = Field(gt=0, allow_inf_nan=False)
    description: str
    image: str
    category: str
