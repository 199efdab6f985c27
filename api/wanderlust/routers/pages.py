"""
Static Informational Pages
"""
from fastapi import APIRouter

router = APIRouter()


ABOUT_NEPAL = {
    "title": "About Nepal",
    "pillars": ["Himalayan Giants", "Rich Culture", "Warm Hospitality"],
    "geography": {
        "location": "South Asia, between China and India",
        "area": "147,516 square kilometers",
        "elevation_range": "From 60m (Terai) to 8,848m (Everest)",
    },
    "best_time_to_visit": [
        {"season": "Autumn (Sep-Nov)", "note": "Perfect for trekking with clear mountain views and stable weather"},
        {"season": "Spring (Mar-May)", "note": "Rhododendrons bloom, warm weather, excellent for trekking"},
        {"season": "Winter (Dec-Feb)", "note": "Clear skies, cold temperatures, perfect for lower altitude treks"},
    ],
    "unesco_sites": [
        "Kathmandu Durbar Square",
        "Patan Durbar Square",
        "Bhaktapur Durbar Square",
        "Swayambhunath Stupa",
        "Boudhanath Stupa",
        "Pashupatinath Temple",
        "Chitwan National Park",
        "Sagarmatha National Park",
    ],
}

CONTACT = {
    "title": "Contact Us",
    "tagline": "Get in touch with our travel experts",
    "email": "info@wanderlust.com",
    "phone": "+1 (555) 123-4567",
    "address": "123 Adventure Street, Travel City, TC 12345",
}


@router.get("/about-nepal")
async def about_nepal():
    """Country guide shown on the About Nepal page"""
    return ABOUT_NEPAL


@router.get("/contact")
async def contact():
    return CONTACT
