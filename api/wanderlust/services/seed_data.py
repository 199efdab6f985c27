"""
Seed Destinations - the in-memory catalog served when Supabase is not configured
"""
from typing import Any, Dict, Iterable, List, Optional

from wanderlust.config import PLACEHOLDER_IMAGE_URL

SEEDED_AT = "2024-01-15T08:00:00.000Z"

# Fields matched by free-text search, in the order the search box documents them
SEARCH_FIELDS = ("name", "country", "region", "description")


def _pexels(photo_id: int) -> str:
    return (
        f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"
        "?auto=compress&cs=tinysrgb&w=800"
    )


SEED_DESTINATIONS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Everest Base Camp Trek",
        "country": "Nepal",
        "region": "Khumbu",
        "description": (
            "The ultimate trekking adventure to the base of the world's highest mountain. "
            "Experience Sherpa culture, stunning mountain views, and the thrill of reaching 5,364m."
        ),
        "rich_description": (
            "Embark on the most iconic trek in the world to Everest Base Camp. This challenging "
            "14-day journey takes you through the heart of the Khumbu region, home to the legendary "
            "Sherpa people."
        ),
        "image_url": _pexels(1287460),
        "price": 2499,
        "duration": "14 days",
        "rating": 4.9,
        "difficulty_level": "Challenging",
        "best_season": "Autumn",
        "highlights": ["Mount Everest views", "Sherpa culture", "Namche Bazaar", "Tengboche Monastery"],
        "latitude": 27.9881,
        "longitude": 86.9250,
        "what_fresh": "Crystal clear mountain air, pristine glacial streams and ancient Buddhist monasteries",
        "special_attractions": ["Everest Base Camp", "Kala Patthar viewpoint", "Sherpa villages", "Buddhist monasteries"],
        "seasonal_highlights": (
            "October-December: Clear skies and stunning mountain views; "
            "March-May: Rhododendron blooms and warmer weather"
        ),
    },
    {
        "id": 2,
        "name": "Annapurna Circuit Trek",
        "country": "Nepal",
        "region": "Annapurna",
        "description": (
            "A classic trek through diverse landscapes, from subtropical forests to high alpine terrain. "
            "Cross the Thorong La Pass at 5,416m and experience incredible mountain panoramas."
        ),
        "rich_description": (
            "The Annapurna Circuit is one of Nepal's most diverse and rewarding treks, through "
            "rhododendron forests, traditional villages and high-altitude deserts."
        ),
        "image_url": _pexels(1559825),
        "price": 1899,
        "duration": "16 days",
        "rating": 4.8,
        "difficulty_level": "Challenging",
        "best_season": "Autumn",
        "highlights": ["Thorong La Pass", "Diverse landscapes", "Hot springs", "Mountain panoramas"],
        "latitude": 28.5967,
        "longitude": 83.8202,
        "what_fresh": "Natural hot springs and ecosystems from tropical to alpine",
        "special_attractions": ["Thorong La Pass", "Muktinath Temple", "Manang village", "Tilicho Lake"],
        "seasonal_highlights": "Spring brings blooming rhododendrons, while autumn offers crystal clear mountain views",
    },
    {
        "id": 3,
        "name": "Kathmandu Valley Tour",
        "country": "Nepal",
        "region": "Central",
        "description": (
            "Explore the cultural heart of Nepal with visits to ancient temples, palaces, and "
            "UNESCO World Heritage Sites in Kathmandu, Bhaktapur, and Patan."
        ),
        "rich_description": (
            "Discover the living heritage of Nepal in the Kathmandu Valley, where medieval cities, "
            "ornate temples and vibrant markets have remained unchanged for centuries."
        ),
        "image_url": _pexels(2850287),
        "price": 299,
        "duration": "3 days",
        "rating": 4.6,
        "difficulty_level": "Easy",
        "best_season": "All seasons",
        "highlights": ["UNESCO sites", "Ancient temples", "Local culture", "Traditional crafts"],
        "latitude": 27.7172,
        "longitude": 85.3240,
        "what_fresh": "Living heritage sites, authentic Newari cuisine and vibrant festivals",
        "special_attractions": ["Durbar Squares", "Swayambhunath Stupa", "Pashupatinath Temple", "Boudhanath Stupa"],
        "seasonal_highlights": "Year-round destination with special festivals throughout the seasons",
    },
    {
        "id": 4,
        "name": "Pokhara Lake District",
        "country": "Nepal",
        "region": "Western",
        "description": (
            "Relax by the serene Phewa Lake with stunning Annapurna mountain reflections. "
            "Perfect for boating, paragliding, and enjoying the laid-back atmosphere."
        ),
        "rich_description": (
            "Pokhara is Nepal's adventure capital and a gateway to the Annapurna region, "
            "blending natural beauty, adventure and relaxation."
        ),
        "image_url": _pexels(1661546),
        "price": 199,
        "duration": "2 days",
        "rating": 4.7,
        "difficulty_level": "Easy",
        "best_season": "All seasons",
        "highlights": ["Phewa Lake", "Mountain views", "Paragliding", "Peace Pagoda"],
        "latitude": 28.2096,
        "longitude": 83.9856,
        "what_fresh": "Mirror-like lake reflections, lakeside dining and sunrise over the Himalayas",
        "special_attractions": ["Phewa Lake", "World Peace Pagoda", "Devi's Fall", "Gupteshwor Cave"],
        "seasonal_highlights": "Clear mountain views in autumn and winter, lush greenery during monsoon",
    },
    {
        "id": 5,
        "name": "Mount Fuji Climb",
        "country": "Japan",
        "region": "Honshu",
        "description": (
            "Climb Japan's sacred mountain and highest peak. Experience traditional Japanese "
            "culture and stunning sunrise views from the summit."
        ),
        "rich_description": (
            "Mount Fuji is Japan's most iconic symbol and a sacred mountain that has inspired "
            "artists and pilgrims for centuries."
        ),
        "image_url": _pexels(2064827),
        "price": 899,
        "duration": "3 days",
        "rating": 4.5,
        "difficulty_level": "Moderate",
        "best_season": "Summer",
        "highlights": ["Sacred mountain", "Sunrise views", "Japanese culture", "Pilgrimage route"],
        "latitude": 35.3606,
        "longitude": 138.7274,
        "what_fresh": "Traditional climbing culture and spectacular sunrise views",
        "special_attractions": ["Summit crater", "Mountain huts", "Five Lakes region", "Traditional shrines"],
        "seasonal_highlights": "July-September climbing season with perfect weather and clear views",
    },
    {
        "id": 6,
        "name": "Bali Cultural Tour",
        "country": "Indonesia",
        "region": "Bali",
        "description": (
            "Discover the Island of Gods with visits to ancient temples, rice terraces, and "
            "traditional villages. Experience Balinese Hindu culture and stunning landscapes."
        ),
        "rich_description": (
            "Bali offers a blend of spiritual culture, natural beauty and tropical beaches."
        ),
        "image_url": _pexels(2474690),
        "price": 799,
        "duration": "7 days",
        "rating": 4.6,
        "difficulty_level": "Easy",
        "best_season": "Dry season",
        "highlights": ["Hindu temples", "Rice terraces", "Traditional villages", "Cultural performances"],
        "latitude": -8.3405,
        "longitude": 115.0920,
        "what_fresh": "Temple ceremonies, traditional arts and crafts, and world-class beaches",
        "special_attractions": ["Tanah Lot Temple", "Tegallalang Rice Terraces", "Ubud Monkey Forest", "Kuta Beach"],
        "seasonal_highlights": "April-October dry season perfect for temple visits and beach activities",
    },
    {
        "id": 7,
        "name": "Langtang Valley Trek",
        "country": "Nepal",
        "region": "Langtang",
        "description": (
            "A short Himalayan trek north of Kathmandu through Tamang villages, yak pastures "
            "and glacier-carved valleys below Langtang Lirung."
        ),
        "image_url": PLACEHOLDER_IMAGE_URL,
        "price": 899,
        "duration": "8 days",
        "rating": 4.6,
        "difficulty_level": "Moderate",
        "best_season": "Spring",
        "highlights": ["Kyanjin Gompa", "Tamang heritage", "Yak cheese factory"],
        "latitude": 28.2115,
        "longitude": 85.5590,
        "special_attractions": ["Kyanjin Ri", "Langtang glacier"],
    },
    {
        "id": 8,
        "name": "Upper Mustang Trek",
        "country": "Nepal",
        "region": "Mustang",
        "description": (
            "Journey into the former Kingdom of Lo, a rain-shadow desert of cave dwellings, "
            "walled villages and Tibetan Buddhist monasteries."
        ),
        "image_url": PLACEHOLDER_IMAGE_URL,
        "price": 2899,
        "duration": "12 days",
        "rating": 4.7,
        "difficulty_level": "Challenging",
        "best_season": "Summer",
        "highlights": ["Lo Manthang", "Sky caves", "Tiji festival"],
        "latitude": 29.1790,
        "longitude": 83.9580,
    },
    {
        "id": 9,
        "name": "Manaslu Circuit Trek",
        "country": "Nepal",
        "region": "Gorkha",
        "description": (
            "A remote circuit around the eighth highest mountain on earth, crossing the "
            "Larkya La pass far from the crowds."
        ),
        "image_url": PLACEHOLDER_IMAGE_URL,
        "price": 2199,
        "duration": "15 days",
        "rating": 4.8,
        "difficulty_level": "Expert",
        "best_season": "Autumn",
        "highlights": ["Larkya La Pass", "Samagaon", "Birendra Lake"],
        "latitude": 28.5497,
        "longitude": 84.5597,
        "seasonal_highlights": "September-November: stable weather for the high pass crossing",
    },
    {
        "id": 10,
        "name": "Island Peak Climb",
        "country": "Nepal",
        "region": "Khumbu",
        "description": (
            "A guided trekking peak ascent of Imja Tse at 6,189m with an acclimatisation trek "
            "through the valleys of the Khumbu."
        ),
        "image_url": PLACEHOLDER_IMAGE_URL,
        "price": 3299,
        "duration": "19 days",
        "rating": 4.7,
        "difficulty_level": "Expert",
        "best_season": "Spring",
        "highlights": ["Summit at 6,189m", "Imja glacier", "Chhukung valley"],
        "latitude": 27.9220,
        "longitude": 86.9350,
    },
    {
        "id": 11,
        "name": "Druk Path Trek",
        "country": "Bhutan",
        "region": "Paro",
        "description": (
            "A high ridge walk between Paro and Thimphu past alpine lakes, dzongs and "
            "views of Gangkhar Puensum."
        ),
        "image_url": PLACEHOLDER_IMAGE_URL,
        "price": 2599,
        "duration": "6 days",
        "rating": 4.5,
        "difficulty_level": "Moderate",
        "best_season": "Spring",
        "highlights": ["Jili Dzong", "Alpine lakes", "Tiger's Nest"],
        "latitude": 27.4305,
        "longitude": 89.4133,
    },
    {
        "id": 12,
        "name": "Kilimanjaro Machame Route",
        "country": "Tanzania",
        "region": "Kilimanjaro",
        "description": (
            "Climb Africa's highest free-standing mountain on a scenic route through "
            "rainforest, heath and alpine desert to Uhuru Peak."
        ),
        "image_url": PLACEHOLDER_IMAGE_URL,
        "price": 2399,
        "duration": "7 days",
        "rating": 4.6,
        "difficulty_level": "Challenging",
        "best_season": "Winter",
        "highlights": ["Uhuru Peak", "Barranco Wall", "Lava Tower"],
        "latitude": -3.0674,
        "longitude": 37.3556,
    },
]

for _record in SEED_DESTINATIONS:
    _record.setdefault("created_at", SEEDED_AT)


def get_seed_destinations() -> List[Dict[str, Any]]:
    """Fresh copies of the seed records, in dataset order"""
    return [dict(record, highlights=list(record.get("highlights", [])),
                 special_attractions=list(record.get("special_attractions", [])))
            for record in SEED_DESTINATIONS]


def filter_destinations(
    records: Iterable[Dict[str, Any]],
    country: Optional[str] = None,
    region: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    difficulty: Optional[str] = None,
    season: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Apply the catalog predicates (AND semantics), keeping input order.

    Falsy arguments are ignored, so a 0 price bound does not constrain.
    """
    result = list(records)

    if country:
        result = [r for r in result if r.get("country") == country]
    if region:
        result = [r for r in result if r.get("region") == region]
    if min_price:
        result = [r for r in result if r.get("price", 0) >= min_price]
    if max_price:
        result = [r for r in result if r.get("price", 0) <= max_price]
    if difficulty:
        result = [r for r in result if r.get("difficulty_level") == difficulty]
    if season:
        result = [r for r in result if r.get("best_season") == season]

    return result


def matches_search(record: Dict[str, Any], term: str, fields: Iterable[str] = SEARCH_FIELDS) -> bool:
    """Case-insensitive substring match against any of the given fields"""
    needle = term.lower()
    return any(needle in (record.get(field) or "").lower() for field in fields)


def sort_by_rating(records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Rating descending; ties keep their existing order"""
    return sorted(records, key=lambda r: r.get("rating", 0), reverse=True)
