"""Unit tests for core.config Settings."""

import pytest
from pydantic import ValidationError

from animgen.core.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.API_V1_STR == "/api/v1"
        assert s.syntax_presets == ("typing", "literals")
        assert s.ANIMATION_SOURCE_FILENAME == "dynamic-animation.py"

    def test_syntax_presets_parsed(self) -> None:
        s = Settings(ANIMATION_SYNTAX_PRESETS=" typing, ,literals ")
        assert s.syntax_presets == ("typing", "literals")
        assert Settings(ANIMATION_SYNTAX_PRESETS="").syntax_presets == ()

    def test_cors_origins_from_string(self) -> None:
        s = Settings(BACKEND_CORS_ORIGINS="http://a.test/, http://b.test")
        assert s.all_cors_origins == ["http://a.test", "http://b.test"]

    def test_invalid_environment(self) -> None:
        with pytest.raises(ValidationError):
            Settings(ENVIRONMENT="qa")
