from datetime import datetime
from pydantic import BaseModel


class MenuCreate(BaseModel):
    handle: str
    title: str


class MenuUpdate(BaseModel):
    title: str


class MenuOut(BaseModel):
    id: int
    handle: str
    title: str
    created_at: datetime

    class Config:
        from_attributes = True
