from pydantic import BaseModel


class Pokemon(BaseModel):
    id: int         # position in the collection, starting at 1
    name: str
    type: str
