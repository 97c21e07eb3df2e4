import pytest
from pydantic import ValidationError

from genre_recommendation.infrastructure.config.settings import RecommenderSettings


class TestRecommenderSettings:
    def test_defaults(self, monkeypatch):
        for name in ("RECO_CATALOG_PATH", "RECO_DEFAULT_TOP_K", "RECO_MAX_TOP_K", "RECO_STRONG_MATCH_THRESHOLD"):
            monkeypatch.delenv(name, raising=False)

        settings = RecommenderSettings(_env_file=None)

        assert settings.catalog_path == "data/movies.json"
        assert settings.default_top_k == 3
        assert settings.strong_match_threshold == 0.0

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RECO_DEFAULT_TOP_K", "5")
        monkeypatch.setenv("RECO_STRONG_MATCH_THRESHOLD", "0.25")

        settings = RecommenderSettings(_env_file=None)

        assert settings.default_top_k == 5
        assert settings.strong_match_threshold == 0.25

    def test_rejects_non_positive_top_k(self):
        with pytest.raises(ValidationError):
            RecommenderSettings(_env_file=None, default_top_k=0)

    def test_rejects_default_above_max(self):
        with pytest.raises(ValidationError, match="default_top_k cannot exceed max_top_k"):
            RecommenderSettings(_env_file=None, default_top_k=10, max_top_k=5)
