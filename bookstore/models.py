# bookstore/models.py
from pydantic import BaseModel


class Book(BaseModel):
    # Missing fields decode to "", unknown fields are ignored.
    id: str = ""
    author: str = ""
    name: str = ""


class StatusMessage(BaseModel):
    Message: str = ""
    Error: str = ""
