from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecommenderSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="RECO_", extra="ignore")

    catalog_path: str = "data/movies.json"
    default_top_k: int = Field(default=3, ge=1)
    max_top_k: int = Field(default=100, ge=1)
    # Top score must be strictly greater than this to count as a strong match
    strong_match_threshold: float = Field(default=0.0, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_top_k_bounds(self) -> "RecommenderSettings":
        if self.default_top_k > self.max_top_k:
            raise ValueError("default_top_k cannot exceed max_top_k")
        return self
