# ai/fallback_recommendations.py
"""
Static, I/O-free recommendations used whenever the LLM path is
unavailable or its output cannot be parsed.
"""
from __future__ import annotations

from api.app.schemas.recommendations import Activity, Hotel, Restaurant, TravelRecommendations

SUMMARY_PREVIEW_LENGTH = 150

FALLBACK_ACTIVITIES: tuple[Activity, ...] = (
    Activity(
        id="mock-act-1",
        title="Free Walking Tour",
        description="Join a free walking tour to explore the city's main attractions with a local guide.",
        category="Tour",
        price=0,
        rating=4.8,
        location="City Center",
    ),
    Activity(
        id="mock-act-2",
        title="Museum Visit",
        description="Explore the local history and culture at the national museum.",
        category="Culture",
        price=15,
        rating=4.6,
        location="Museum District",
    ),
    Activity(
        id="mock-act-3",
        title="Street Food Tour",
        description="Sample authentic local street food at popular food markets.",
        category="Food",
        price=25,
        rating=4.7,
        location="Food Market District",
    ),
    Activity(
        id="mock-act-4",
        title="City Park Picnic",
        description="Relax in the beautiful city park with scenic views.",
        category="Leisure",
        price=5,
        rating=4.5,
        location="Central Park",
    ),
    Activity(
        id="mock-act-5",
        title="Evening River Cruise",
        description="Enjoy a scenic boat ride along the river at sunset.",
        category="Adventure",
        price=30,
        rating=4.9,
        location="Riverside",
    ),
)

FALLBACK_HOTELS: tuple[Hotel, ...] = (
    Hotel(
        id="mock-hotel-1",
        name="Budget Hostel Downtown",
        description="Clean, modern hostel in the heart of the city with free WiFi and breakfast.",
        price_per_night=25,
        rating=4.3,
        location="Downtown",
        amenities=["WiFi", "Breakfast", "Lockers", "Common Room"],
    ),
    Hotel(
        id="mock-hotel-2",
        name="Student Residence Hotel",
        description="Affordable hotel near universities with study spaces and kitchen access.",
        price_per_night=40,
        rating=4.5,
        location="University District",
        amenities=["WiFi", "Kitchen", "Laundry", "Study Room"],
    ),
    Hotel(
        id="mock-hotel-3",
        name="Boutique B&B",
        description="Cozy bed and breakfast with local charm and hearty breakfast included.",
        price_per_night=55,
        rating=4.7,
        location="Old Town",
        amenities=["WiFi", "Breakfast", "Garden", "Bicycle Rental"],
    ),
)

FALLBACK_RESTAURANTS: tuple[Restaurant, ...] = (
    Restaurant(
        id="mock-rest-1",
        name="Local Eats Cafe",
        description="Popular cafe serving traditional dishes at budget-friendly prices.",
        cuisine="Local",
        price_range="$",
        rating=4.4,
        location="City Center",
    ),
    Restaurant(
        id="mock-rest-2",
        name="Pizza Corner",
        description="Authentic wood-fired pizzas with student discounts.",
        cuisine="Italian",
        price_range="$",
        rating=4.6,
        location="Downtown",
    ),
    Restaurant(
        id="mock-rest-3",
        name="Fusion Street Kitchen",
        description="Modern fusion cuisine with affordable lunch specials.",
        cuisine="Fusion",
        price_range="$$",
        rating=4.5,
        location="Trendy District",
    ),
)


def preview_summary(conversation_summary: str) -> str:
    """First SUMMARY_PREVIEW_LENGTH chars, with "..." appended when cut."""
    text = conversation_summary or ""
    if len(text) > SUMMARY_PREVIEW_LENGTH:
        return text[:SUMMARY_PREVIEW_LENGTH] + "..."
    return text


def generate_fallback_recommendations(conversation_summary: str) -> TravelRecommendations:
    return TravelRecommendations(
        summary=preview_summary(conversation_summary),
        activities=[item.model_copy() for item in FALLBACK_ACTIVITIES],
        hotels=[item.model_copy(deep=True) for item in FALLBACK_HOTELS],
        restaurants=[item.model_copy() for item in FALLBACK_RESTAURANTS],
    )
