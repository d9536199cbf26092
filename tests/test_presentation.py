# ABOUTME: Contract tests for the pure display mappings.
# ABOUTME: Validates glyph lookup, clock formatting, failure text, and the success card view.

import locale

import pytest

from cityweather.models import WeatherEnvelope
from cityweather.presentation import (
    DEFAULT_FAILURE_MESSAGE,
    DEFAULT_GLYPH,
    INVALID_TIME,
    build_weather_view,
    condition_to_glyph,
    failure_message,
    format_clock_time,
    round_half_up,
)


class TestConditionToGlyph:
    @pytest.mark.parametrize(
        "condition, glyph",
        [
            ("Clear", "☀️"),
            ("clouds", "☁️"),
            ("RAIN", "🌧️"),
            ("Snow", "❄️"),
            ("Thunderstorm", "⛈️"),
            ("Drizzle", "🌦️"),
        ],
    )
    def test_known_conditions(self, condition, glyph):
        """Known conditions map to their glyph regardless of case.

        Implementation: Looks up each category in mixed case.
        Passing implies: Matching is case-insensitive and exact.
        """
        assert condition_to_glyph(condition) == glyph

    def test_mist_and_fog_share_a_glyph(self):
        """Mist and fog render the same.

        Implementation: Compares the two lookups.
        Passing implies: Both low-visibility conditions use one glyph.
        """
        assert condition_to_glyph("Mist") == condition_to_glyph("Fog") == "🌫️"

    @pytest.mark.parametrize("condition", ["", "Haze", "Tornado", " clear", "clear sky"])
    def test_unknown_conditions_use_default(self, condition):
        """Anything outside the table maps to the default glyph.

        Implementation: Looks up empty, unknown, and near-miss values.
        Passing implies: The mapping is total and never returns an empty glyph.
        """
        assert condition_to_glyph(condition) == DEFAULT_GLYPH
        assert condition_to_glyph(condition) != ""


class TestFormatClockTime:
    def test_formats_utc_by_default(self):
        """Epoch seconds render as a zero-padded 12-hour clock in UTC.

        Implementation: Formats 1700000000 (2023-11-14 22:13:20 UTC) and the epoch itself.
        Passing implies: Hours and minutes are two digits with an AM/PM marker.
        """
        assert format_clock_time(1700000000) == "10:13 PM"
        assert format_clock_time(0) == "12:00 AM"

    @pytest.mark.parametrize("value, expected", [(43200, "12:00 PM"), (46800, "01:00 PM"), (3540, "12:59 AM")])
    def test_noon_and_midnight_hours(self, value, expected):
        """Hour 0 renders as 12 AM and hour 12 as 12 PM.

        Implementation: Formats instants just after midnight, at noon, and one hour later.
        Passing implies: The 12-hour clock wraps the same way as an en-US browser clock.
        """
        assert format_clock_time(value) == expected

    def test_ignores_process_locale(self):
        """The AM/PM marker does not follow LC_TIME.

        Implementation: Switches LC_TIME to a German locale when one is installed.
        Passing implies: Clock strings are identical on every host.
        """
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            assert format_clock_time(1700000000) == "10:13 PM"
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    def test_uses_given_time_zone(self):
        """A zone name shifts the rendered clock.

        Implementation: Formats the same instant for Asia/Tokyo.
        Passing implies: Sunrise and sunset can be shown in the city's local time.
        """
        assert format_clock_time(1700000000, "Asia/Tokyo") == "07:13 AM"

    @pytest.mark.parametrize("value", [1e20, -1e20, float("nan"), float("inf")])
    def test_unrepresentable_values_render_placeholder(self, value):
        """Timestamps outside the datetime range produce a fixed string.

        Implementation: Formats huge, NaN, and infinite values.
        Passing implies: Clock formatting never raises.
        """
        assert format_clock_time(value) == INVALID_TIME

    def test_unknown_zone_renders_placeholder(self):
        """An unknown zone name produces the fixed string instead of raising.

        Implementation: Formats with a zone that does not exist.
        Passing implies: Bad display configuration cannot break rendering.
        """
        assert format_clock_time(1700000000, "Mars/Olympus_Mons") == INVALID_TIME

    def test_negative_values_are_deterministic(self):
        """Small negative timestamps still produce a stable string.

        Implementation: Formats -1 twice.
        Passing implies: Pre-epoch input is handled without raising.
        """
        assert format_clock_time(-1) == format_clock_time(-1)
        assert format_clock_time(-1) != ""


class TestFailureMessage:
    def test_uses_provider_message(self, not_found_payload):
        """The provider's message is shown verbatim.

        Implementation: Builds an envelope from the not-found payload.
        Passing implies: Provider-controlled text reaches the failure card.
        """
        assert failure_message(WeatherEnvelope.model_validate(not_found_payload)) == "City not found"

    @pytest.mark.parametrize("message", [None, ""])
    def test_falls_back_when_message_missing(self, message):
        """Missing or empty messages use the generic fallback.

        Implementation: Builds failure envelopes without usable messages.
        Passing implies: The failure card always has text.
        """
        envelope = WeatherEnvelope(success=False, city="X", error="e", message=message)
        assert failure_message(envelope) == DEFAULT_FAILURE_MESSAGE


class TestBuildWeatherView:
    def test_renders_success_card(self, tokyo_payload):
        """A success envelope renders into display strings.

        Implementation: Builds a view for the Tokyo payload in Asia/Tokyo.
        Passing implies: Rounding, units, and sun times match the card layout.
        """
        view = build_weather_view(WeatherEnvelope.model_validate(tokyo_payload), "Asia/Tokyo")

        assert view.heading == "Tokyo, JP"
        assert view.glyph == "☀️"
        assert view.temperature == "18°C"
        assert view.feels_like == "Feels like 18°C"
        assert view.description == "clear sky"
        assert view.humidity == "62%"
        assert view.wind_speed == "4 m/s"
        assert view.pressure == "1015 hPa"
        assert view.visibility == "10.0 km"
        assert view.sunrise == "06:00 AM"
        assert view.sunset == "04:30 PM"

    def test_failure_has_no_view(self, not_found_payload):
        """Failure envelopes produce no success card.

        Implementation: Builds a view for the not-found payload.
        Passing implies: Callers render the failure card instead.
        """
        assert build_weather_view(WeatherEnvelope.model_validate(not_found_payload)) is None


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [(0.5, "1"), (1.5, "2"), (2.5, "3"), (-0.5, "0"), (-1.6, "-2")])
    def test_rounds_halves_up(self, value, expected):
        """Halves round toward positive infinity.

        Implementation: Rounds values on and around .5 boundaries.
        Passing implies: Displayed temperatures do not use banker's rounding.
        """
        assert round_half_up(value) == expected

    def test_non_finite_is_dashed(self):
        """Non-finite values render as dashes.

        Implementation: Rounds NaN.
        Passing implies: Odd measurements cannot break card rendering.
        """
        assert round_half_up(float("nan")) == "--"
