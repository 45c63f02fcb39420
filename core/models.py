from dataclasses import dataclass
import datetime
from typing import Any, Dict, List, Optional
from bs4 import BeautifulSoup
from pydantic import BaseModel, Field, validator


# Column order as stored in the sheets. It differs from the field order of
# Listing and must stay this way for rows already written.
SHEET_COLUMNS: Dict[str, str] = {
    "title": "text",
    "price": "text",
    "description": "text",
    "date": "date",
    "link": "text",
    "beds": "integer",
}


class Listing(BaseModel):
    title: Optional[str] = None
    price: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    # First time we saw the listing, not the posting date
    date: datetime.date = Field(default_factory=datetime.date.today)
    beds: int

    @validator("link", pre=True)
    def blank_link_is_absent(cls, v):
        if v is None:
            return None
        value = str(v).strip()
        if not value:
            return None
        return value

    def is_complete(self) -> bool:
        """A listing is only worth persisting with both a link and a price."""
        return bool(self.link) and bool(self.price and self.price.strip())

    def to_row(self) -> List[Any]:
        data = self.model_dump()
        row = []
        for column in SHEET_COLUMNS:
            value = data[column]
            if value is None:
                row.append("")
            elif isinstance(value, datetime.date):
                row.append(value.isoformat())
            else:
                row.append(value)
        return row


class SearchDefinition(BaseModel):
    region: str
    beds: int
    url: str
    dataset: str
    # Names the search in results and logs
    key: Optional[str] = None

    @validator("key", pre=True, always=True)
    def default_key(cls, v, values):
        if v:
            return v
        return f"{values.get('region')}_{values.get('beds')}_bedroom"


@dataclass
class FetchResult:
    """Outcome of a single page fetch: either a parsed page or the reason there is none."""

    url: str
    page: Optional[BeautifulSoup] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.page is not None
