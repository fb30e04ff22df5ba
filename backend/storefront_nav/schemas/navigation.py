from pydantic import BaseModel


class NavItemOut(BaseModel):
    id: int
    title: str
    url: str
    active: bool
    child_active: bool = False
    children: list["NavItemOut"] = []

    class Config:
        from_attributes = True


class NavigationOut(BaseModel):
    handle: str
    title: str
    active_section_id: int | None
    items: list[NavItemOut]


NavItemOut.model_rebuild()
