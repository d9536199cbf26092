# ABOUTME: Pydantic BaseModels for weather envelopes, background images, and selection state.
# ABOUTME: Defines the structured types shared by the resolvers, the controller, and the presentation layer.

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Coordinates(BaseModel):
    """Geographic position of the observed city."""

    latitude: float
    longitude: float


class WeatherData(BaseModel):
    """Current conditions for a city as served by the weather provider."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: float
    feels_like: float
    humidity: float = Field(ge=0, le=100)
    pressure: float
    description: str
    main_condition: str = Field(alias="main")
    wind_speed: float
    wind_direction: float
    cloud_coverage: float = Field(alias="clouds", ge=0, le=100)
    visibility_meters: float = Field(alias="visibility")
    country: str
    sunrise: float
    sunset: float
    coordinates: Coordinates
    observed_at: float = Field(alias="timestamp")
    fetched_at: float = Field(alias="data_fetched_at")


class WeatherEnvelope(BaseModel):
    """Tagged success/failure result for a weather lookup.

    ``data`` is present exactly when ``success`` is true, ``city`` always.
    """

    success: bool
    city: str
    data: WeatherData | None = None
    error: str | None = None
    message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_data_on_failure(cls, values: Any) -> Any:
        if isinstance(values, dict) and values.get("success") is False and values.get("data") is not None:
            values = {k: v for k, v in values.items() if k != "data"}
        return values

    @model_validator(mode="after")
    def _require_data_on_success(self) -> "WeatherEnvelope":
        if self.success and self.data is None:
            raise ValueError("success envelope is missing data")
        if not self.success:
            self.data = None
        return self

    @classmethod
    def failure(cls, city: str, error: str, message: str) -> "WeatherEnvelope":
        return cls(success=False, city=city, error=error, message=message)


class ImageReference(BaseModel):
    """Background image URL, tagged by where it came from."""

    url: str
    tag: Literal["resolved", "placeholder"]

    def __str__(self) -> str:
        return self.url


class SelectionState(BaseModel):
    """The single view state a caller renders from."""

    selected_city: str | None = None
    loading: bool = False
    weather: WeatherEnvelope | None = None
    background: ImageReference | None = None

    @property
    def phase(self) -> Literal["idle", "loading", "weather_ready"]:
        if self.selected_city is None:
            return "idle"
        if self.loading:
            return "loading"
        return "weather_ready"
