from pydantic import BaseModel


class Region(BaseModel):
    name: str
    slug: str


class Country(BaseModel):
    code: str
    name: str
    slug: str
    regions: dict[str, Region] | None = None
