"""
Destination Schemas
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Any

from wanderlust.config import PLACEHOLDER_IMAGE_URL


DIFFICULTY_LEVELS = ["Easy", "Moderate", "Challenging", "Expert"]
SEASONS = ["Spring", "Summer", "Autumn", "Winter", "All seasons"]

GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"
DEFAULT_MAP_ZOOM = 10


def _split_list(value: Any) -> Any:
    """Accept "a, b, ,c" from the admin form as well as a real list"""
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class DestinationBase(BaseModel):
    """Fields shared by every destination shape"""
    name: str
    country: str
    region: Optional[str] = None
    description: str
    rich_description: Optional[str] = None
    image_url: str = PLACEHOLDER_IMAGE_URL
    price: float = Field(ge=0)
    duration: str
    rating: float = 4.0
    difficulty_level: Optional[str] = None
    best_season: Optional[str] = None
    highlights: List[str] = []
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    what_fresh: Optional[str] = None
    special_attractions: List[str] = []
    seasonal_highlights: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("image_url", mode="before")
    @classmethod
    def default_image(cls, value: Any) -> Any:
        return value or PLACEHOLDER_IMAGE_URL

    @field_validator("highlights", "special_attractions", mode="before")
    @classmethod
    def split_lists(cls, value: Any) -> Any:
        return _split_list(value)


class DestinationCreate(DestinationBase):
    """Admin payload for a new destination (id and created_at are assigned)"""
    rating: float = Field(default=4.0, ge=1.0, le=5.0)


class DestinationUpdate(BaseModel):
    """Partial update - only fields the caller actually sent are applied"""
    name: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    description: Optional[str] = None
    rich_description: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    duration: Optional[str] = None
    rating: Optional[float] = Field(default=None, ge=1.0, le=5.0)
    difficulty_level: Optional[str] = None
    best_season: Optional[str] = None
    highlights: Optional[List[str]] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    what_fresh: Optional[str] = None
    special_attractions: Optional[List[str]] = None
    seasonal_highlights: Optional[str] = None

    @field_validator("highlights", "special_attractions", mode="before")
    @classmethod
    def split_lists(cls, value: Any) -> Any:
        if value is None:
            return None
        return _split_list(value)

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller"""
        return self.model_dump(exclude_unset=True)


class Destination(DestinationBase):
    """A stored destination"""
    id: int
    created_at: str


class DestinationPatchResult(DestinationUpdate):
    """
    Result of an update in fallback mode: the id merged with the supplied
    fields only, since no prior state is read.
    """
    id: int


class MapMarker(BaseModel):
    lat: float
    lng: float
    title: str


class MapView(BaseModel):
    """Data the map widget needs; rendering is the client's job"""
    lat: float
    lng: float
    zoom: int = DEFAULT_MAP_ZOOM
    markers: List[MapMarker] = []


class DestinationDetail(Destination):
    """Destination with presence-gated extras for the detail view"""
    has_location: bool = False
    map: Optional[MapView] = None
    directions_url: Optional[str] = None
    season_badge: Optional[str] = None

    @classmethod
    def from_destination(cls, destination: Destination) -> "DestinationDetail":
        data = destination.model_dump()
        if destination.latitude is not None and destination.longitude is not None:
            lat, lng = destination.latitude, destination.longitude
            data["has_location"] = True
            data["map"] = MapView(
                lat=lat,
                lng=lng,
                markers=[MapMarker(lat=lat, lng=lng, title=destination.name)],
            )
            data["directions_url"] = GOOGLE_MAPS_DIRECTIONS_URL.format(lat=lat, lng=lng)
        if destination.best_season:
            data["season_badge"] = destination.best_season
        return cls(**data)


class DestinationFilters(BaseModel):
    """
    Catalog filter predicates. Falsy values (None, "", 0) mean "not set",
    matching what the search bar sends when a field is cleared.
    """
    country: Optional[str] = None
    region: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    difficulty: Optional[str] = None
    season: Optional[str] = None

    def active(self) -> dict:
        """Only the predicates that should constrain the result"""
        return {key: value for key, value in self.model_dump().items() if value}


class DestinationListResponse(BaseModel):
    """Schema for catalog listing"""
    destinations: List[Destination]
    total: int
    query: Optional[str] = None


class AdminDestinationListResponse(BaseModel):
    """Admin panel listing: all records plus the search-box subset"""
    destinations: List[Destination]
    total: int
    matched: int


class FilterOptionsResponse(BaseModel):
    countries: List[str]
    regions: List[str]
    difficulty_levels: List[str] = DIFFICULTY_LEVELS
    seasons: List[str] = SEASONS


class ImageUploadResponse(BaseModel):
    image_url: str
    destination_id: int


class DeleteResponse(BaseModel):
    deleted: bool
    id: int
