"""Sample cities and readings served by the demo client."""

from weatherdash.models.weather import CitySuggestion

DEMO_CITIES: list[CitySuggestion] = [
    CitySuggestion(name="London", country="GB", state="", latitude=51.5074, longitude=-0.1278),
    CitySuggestion(name="New York", country="US", state="NY", latitude=40.7128, longitude=-74.0060),
    CitySuggestion(name="Tokyo", country="JP", state="", latitude=35.6762, longitude=139.6503),
    CitySuggestion(name="Paris", country="FR", state="", latitude=48.8566, longitude=2.3522),
    CitySuggestion(name="Sydney", country="AU", state="", latitude=-33.8688, longitude=151.2093),
    CitySuggestion(name="Dubai", country="AE", state="", latitude=25.2048, longitude=55.2708),
    CitySuggestion(name="Singapore", country="SG", state="", latitude=1.3521, longitude=103.8198),
    CitySuggestion(name="Colombo", country="LK", state="", latitude=6.9271, longitude=79.8612),
]

DEMO_COUNTRY = "DEMO"

# (description, icon_id) pairs the demo forecast cycles through
DEMO_CONDITIONS: list[tuple[str, str]] = [
    ("sunny", "01d"),
    ("partly cloudy", "02d"),
    ("cloudy", "03d"),
    ("rainy", "10d"),
]
