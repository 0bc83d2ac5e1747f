# estate_api/schemas.py
from pydantic import BaseModel
from typing import Any, Optional

# Fields are stored verbatim (strings from forms, any JSON value from JSON bodies);
# anything the client left out stays absent.

class Property(BaseModel):
    id: int
    name: Optional[Any] = None
    price: Optional[Any] = None
    location: Optional[Any] = None
    sqft: Optional[Any] = None
    image: str = ""

class Project(BaseModel):
    id: int
    name: Optional[Any] = None
    location: Optional[Any] = None
    description: Optional[Any] = None
    image: str = ""

class Message(BaseModel):
    message: str
