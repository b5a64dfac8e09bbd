"""Built-in world city catalog used when no cities are configured."""

from .models import City


DEFAULT_CITIES: tuple[City, ...] = (
    # North America
    City("New York", "United States", "America/New_York", -300),
    City("Los Angeles", "United States", "America/Los_Angeles", -480),
    City("Chicago", "United States", "America/Chicago", -360),
    City("Toronto", "Canada", "America/Toronto", -300),
    City("Vancouver", "Canada", "America/Vancouver", -480),
    City("Mexico City", "Mexico", "America/Mexico_City", -360),
    City("São Paulo", "Brazil", "America/Sao_Paulo", -180),
    # Europe
    City("London", "United Kingdom", "Europe/London", 0),
    City("Paris", "France", "Europe/Paris", 60),
    City("Berlin", "Germany", "Europe/Berlin", 60),
    City("Madrid", "Spain", "Europe/Madrid", 60),
    City("Rome", "Italy", "Europe/Rome", 60),
    City("Amsterdam", "Netherlands", "Europe/Amsterdam", 60),
    City("Stockholm", "Sweden", "Europe/Stockholm", 60),
    City("Moscow", "Russia", "Europe/Moscow", 180),
    # Asia
    City("Dubai", "United Arab Emirates", "Asia/Dubai", 240),
    City("Tokyo", "Japan", "Asia/Tokyo", 540),
    City("Shanghai", "China", "Asia/Shanghai", 480),
    City("Hong Kong", "Hong Kong", "Asia/Hong_Kong", 480),
    City("Singapore", "Singapore", "Asia/Singapore", 480),
    City("Bangkok", "Thailand", "Asia/Bangkok", 420),
    City("Mumbai", "India", "Asia/Kolkata", 330),
    City("Seoul", "South Korea", "Asia/Seoul", 540),
    City("Jakarta", "Indonesia", "Asia/Jakarta", 420),
    # Oceania
    City("Sydney", "Australia", "Australia/Sydney", 600),
    City("Melbourne", "Australia", "Australia/Melbourne", 600),
    City("Auckland", "New Zealand", "Pacific/Auckland", 720),
    # Africa
    City("Cairo", "Egypt", "Africa/Cairo", 120),
    City("Lagos", "Nigeria", "Africa/Lagos", 60),
    City("Johannesburg", "South Africa", "Africa/Johannesburg", 120),
    # South America
    City("Buenos Aires", "Argentina", "America/Argentina/Buenos_Aires", -180),
    City("Lima", "Peru", "America/Lima", -300),
)

# Quick-pick subset shown by the world clock when nothing is selected
POPULAR_CITY_NAMES: tuple[str, ...] = (
    "New York",
    "Los Angeles",
    "Chicago",
    "London",
    "Paris",
    "Berlin",
    "Dubai",
    "Tokyo",
    "Sydney",
    "Singapore",
)
