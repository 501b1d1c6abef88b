import os
from typing import List

import requests

# Backend API configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:5000")
WEATHER_URL = f"{BACKEND_URL}/api/weather"


def fetch_weather(city: str) -> dict:
    """Fetch a weather snapshot; failures come back as {"error": ...}."""
    try:
        response = requests.get(WEATHER_URL, params={"city": city}, timeout=15)
        if response.status_code != 200:
            return {"error": _error_message(response)}
        snapshot = response.json()
    except requests.exceptions.ConnectionError:
        return {
            "error": f"Cannot connect to backend. Make sure the backend is running at {BACKEND_URL}."
        }
    except requests.exceptions.Timeout:
        return {"error": "Request timed out. Please try again."}
    except requests.exceptions.RequestException as e:
        return {"error": f"An error occurred: {str(e)}"}
    except ValueError:
        return {"error": "Backend returned an invalid response."}
    if not isinstance(snapshot, dict):
        return {"error": "Backend returned an invalid response."}
    return snapshot


def search_cities(query: str) -> List[dict]:
    """Autocomplete matches; any failure just means no suggestions."""
    try:
        response = requests.get(f"{WEATHER_URL}/search", params={"query": query}, timeout=5)
        response.raise_for_status()
        results = response.json()
    except (requests.exceptions.RequestException, ValueError):
        return []
    return results if isinstance(results, list) else []


def check_backend_health() -> bool:
    """Check if backend is running."""
    try:
        response = requests.get(f"{BACKEND_URL}/health", timeout=2)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def _error_message(response: requests.Response) -> str:
    try:
        return response.json().get("error", f"HTTP {response.status_code}")
    except (ValueError, AttributeError):
        return response.text or f"HTTP {response.status_code}"
