from pydantic import BaseModel


class RegionItem(BaseModel):
    code: str
    name: str
    slug: str


class CountryItem(BaseModel):
    code: str
    name: str
    slug: str
    flag_url: str
    has_regions: bool


class CountryDetail(CountryItem):
    regions: list[RegionItem]
