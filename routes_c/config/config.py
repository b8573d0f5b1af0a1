from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Google Routes API configuration
    google_maps_api_key: str = ""
    routes_url: str = "https://routes.googleapis.com/directions/v2:computeRoutes"
    request_timeout_s: float = 10.0

    # API configuration
    api_version: str = "1.0"
    log_level: str = "INFO"

    # API call limits
    max_api_calls_per_day: int = 1000
    min_request_interval_s: float = 1.0
    rate_limit_cooldown_s: float = 60.0

    # Loop search
    max_attempts_per_strategy: int = 8
    distance_tolerance_miles: float = 0.3
    distance_tolerance_fraction: float = 0.15
    invalid_distance_fraction: float = 0.3

    # Roughly a 1% average grade
    elevation_grade_factor: float = 0.01

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
