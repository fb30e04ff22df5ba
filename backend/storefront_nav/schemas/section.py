from pydantic import BaseModel


class SectionCreate(BaseModel):
    title: str
    url: str
    parent_id: int | None = None
    sort_order: int | None = None


class SectionUpdate(BaseModel):
    title: str | None = None
    url: str | None = None
    parent_id: int | None = None
    sort_order: int | None = None


class SectionOut(BaseModel):
    id: int
    menu_id: int
    parent_id: int | None
    title: str
    url: str
    sort_order: int

    class Config:
        from_attributes = True
