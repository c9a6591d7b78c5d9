from typing import Union
from pydantic import BaseModel, Field

# Prices and ratings keep the JSON type they were written with: 5 stays 5, "6.50" stays "6.50"
Price = Union[int, float, str]

class Product(BaseModel):
    id: int = Field(ge=0)
    name: str
    image: str
    price: Price
    category: str
    description: str
    rating: Union[int, float]
    reviews: int = Field(ge=0)

    model_config = {"frozen": True}  # immuable = safe
