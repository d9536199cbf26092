# ABOUTME: Shared test fixtures for the city weather test suite.
# ABOUTME: Provides weather and photo provider payloads used across service and controller tests.

import pytest


@pytest.fixture
def tokyo_payload() -> dict:
    """A success envelope as the weather provider serves it for Tokyo."""
    return {
        "success": True,
        "city": "Tokyo",
        "data": {
            "timestamp": 1700000000,
            "data_fetched_at": 1700000420,
            "temperature": 18.4,
            "feels_like": 17.5,
            "humidity": 62,
            "pressure": 1015,
            "description": "clear sky",
            "main": "Clear",
            "wind_speed": 3.6,
            "wind_direction": 140,
            "clouds": 0,
            "visibility": 10000,
            "country": "JP",
            "sunrise": 1699995600,
            "sunset": 1700033400,
            "coordinates": {"latitude": 35.6895, "longitude": 139.6917},
        },
    }


@pytest.fixture
def not_found_payload() -> dict:
    """A provider-reported failure envelope."""
    return {
        "success": False,
        "city": "Nowhereville",
        "error": "not_found",
        "message": "City not found",
    }


@pytest.fixture
def photo_payload() -> dict:
    """A photo search response with a single result."""
    return {
        "total": 1,
        "results": [
            {
                "id": "abc123",
                "urls": {
                    "full": "https://images.example.com/tokyo-full.jpg",
                    "regular": "https://images.example.com/tokyo-regular.jpg",
                },
            }
        ],
    }
