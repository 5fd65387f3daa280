"""Plain-text formatters for the console dashboard."""

from weatherdash.models.common import Severity
from weatherdash.models.weather import CitySuggestion, ForecastDay, WeatherReading

SEVERITY_MARKERS = {
    Severity.SUCCESS: "✅",
    Severity.ERROR: "❌",
    Severity.INFO: "ℹ️ ",
}


def format_current_weather(r: WeatherReading) -> str:
    uv = r.uv_index if r.uv_index else "N/A"
    lines = [
        f"=== {r.city}, {r.country} ===",
        f"{r.temperature_c}°C, {r.description}",
        f"Feels like: {r.feels_like_c}°C | Humidity: {r.humidity_pct}%",
        f"Wind: {r.wind_speed_mps} m/s | Pressure: {r.pressure_hpa} hPa",
        f"Visibility: {r.visibility_km:g} km | UV index: {uv}",
        f"Icon: {r.icon_url}",
    ]
    return "\n".join(lines)


def format_forecast(days: list[ForecastDay]) -> str:
    if not days:
        return "No forecast available"
    lines = ["--- Forecast ---"]
    for d in days:
        lines.append(
            f"{d.date.strftime('%a, %b %d')}: {d.temperature_c}°C {d.description} "
            f"(humidity {d.humidity_pct}%, wind {d.wind_speed_mps} m/s)"
        )
    return "\n".join(lines)


def format_suggestions(cities: list[CitySuggestion]) -> str:
    return "\n".join(
        f"  [{i}] {c.display_name}" for i, c in enumerate(cities, start=1)
    )


def format_recent_searches(cities: list[str]) -> str:
    if not cities:
        return "Recent: (none)"
    return "Recent: " + " | ".join(
        f"[{i}] {c}" for i, c in enumerate(cities, start=1)
    )


def format_notification(message: str, severity: Severity) -> str:
    return f"{SEVERITY_MARKERS.get(severity, '')} {message}"


def format_error(title: str, message: str) -> str:
    return f"!!! {title}\n    {message}\n    (type :retry to dismiss)"
