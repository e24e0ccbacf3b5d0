"""Static browse catalog: categories and curated collections.

Both map a friendly id to the Pexels search query that backs it. Unknown ids
fall through as the raw search query.
"""

CATEGORY_QUERIES = {
    "nature": "nature landscape",
    "technology": "technology",
    "business": "business office",
    "people": "people",
    "animals": "animals wildlife",
    "travel": "travel city",
    "sports": "sports",
    "food": "food cooking",
    "music": "music concert",
    "art": "art creative",
}

COLLECTION_QUERIES = {
    "featured": "4k beautiful cinematic",
    "4k": "4k ultra hd quality",
    "slowmo": "slow motion cinematic",
    "aerial": "drone aerial view",
    "time-lapse": "time lapse",
    "underwater": "underwater ocean",
}

COLLECTIONS = [
    {
        "id": "featured",
        "name": "Featured Videos",
        "description": "Hand-picked high quality videos",
        "thumbnail": "https://images.pexels.com/videos/3209298/free-video-3209298.jpg",
        "count": 50,
    },
    {
        "id": "4k",
        "name": "4K Ultra HD",
        "description": "Stunning 4K resolution videos",
        "thumbnail": "https://images.pexels.com/videos/3045163/free-video-3045163.jpg",
        "count": 100,
    },
    {
        "id": "slowmo",
        "name": "Slow Motion",
        "description": "Beautiful slow motion footage",
        "thumbnail": "https://images.pexels.com/videos/3015520/free-video-3015520.jpg",
        "count": 75,
    },
    {
        "id": "aerial",
        "name": "Aerial & Drone",
        "description": "Breathtaking aerial views",
        "thumbnail": "https://images.pexels.com/videos/3121459/free-video-3121459.jpg",
        "count": 60,
    },
    {
        "id": "time-lapse",
        "name": "Time Lapse",
        "description": "Time lapse videos of nature and cities",
        "thumbnail": "https://images.pexels.com/videos/3561874/free-video-3561874.jpg",
        "count": 45,
    },
    {
        "id": "underwater",
        "name": "Underwater",
        "description": "Marine life and underwater scenes",
        "thumbnail": "https://images.pexels.com/videos/3362061/free-video-3362061.jpg",
        "count": 30,
    },
]

# Reported by /api/stats; the catalog size is not queried from Pexels.
TOTAL_VIDEOS_ESTIMATE = 15000


def category_query(category: str) -> str:
    return CATEGORY_QUERIES.get(category, category)


def collection_query(collection_id: str) -> str:
    return COLLECTION_QUERIES.get(collection_id, collection_id)
