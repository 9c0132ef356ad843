"""Configuration schema validation using Pydantic."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SiteConfigModel(BaseModel):
    """The static site asset: languages and their translations."""

    model_config = ConfigDict(extra="allow")

    languages: list[str] = Field(default_factory=list)
    translations: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v):
        """Language codes must be non-empty and unique."""
        seen = set()
        for code in v:
            if not code:
                raise ValueError("Language codes must be non-empty")
            if code in seen:
                raise ValueError(f"Duplicate language code: {code}")
            seen.add(code)
        return v

    @model_validator(mode="after")
    def fill_missing_translations(self):
        """Every listed language gets a (possibly empty) translation table."""
        for code in self.languages:
            self.translations.setdefault(code, {})
        return self


class RowCountConfig(BaseModel):
    """Bounds for the ``count`` hash parameter."""

    default: int = Field(default=400, ge=1)
    minimum: int = Field(default=1, ge=1)
    maximum: int = Field(default=4000, ge=1)

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.minimum > self.maximum:
            raise ValueError("row_count.minimum must not exceed row_count.maximum")
        return self


class AppSettings(BaseModel):
    """Runtime settings, overridable from SYNTHDATA_* environment variables."""

    default_language: str = "en"
    site_name: str = "Synthetic Data"
    row_count: RowCountConfig = Field(default_factory=RowCountConfig)
    log_level: str = "INFO"
    config_load_timeout: float = Field(default=10.0, gt=0)


def validate_site_config(config_dict: dict[str, Any]) -> SiteConfigModel:
    """Validate the site asset.

    Args:
        config_dict: Raw dictionary parsed from the asset

    Returns:
        Validated SiteConfigModel

    Raises:
        pydantic.ValidationError: If the asset is malformed
    """
    return SiteConfigModel(**config_dict)


def config_to_dict(config: BaseModel) -> dict[str, Any]:
    """Convert a validated model back to a dictionary."""
    return config.model_dump()
