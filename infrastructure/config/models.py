"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.schemas import TaxonomyType, coerce_taxonomy_type
from infrastructure.constants import DOMAINS_FILE, SKILLS_FILE


def _default_taxonomy_files() -> dict[TaxonomyType, Path]:
    return {TaxonomyType.SKILL: SKILLS_FILE, TaxonomyType.DOMAIN: DOMAINS_FILE}


class BrowserConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from browser.yaml
    - Environment overrides applied by the configuration loader
    - Consumed by the taxonomy browser and the CLI
    """

    default_type: TaxonomyType = Field(
        default=TaxonomyType.SKILL,
        description="Taxonomy type shown when a browsing session starts.",
    )
    match_slugs: bool = Field(
        default=False,
        description="If true, queries also match slug strings, not only display names.",
    )
    taxonomy_files: dict[TaxonomyType, Path] = Field(
        default_factory=_default_taxonomy_files,
        description="YAML file holding the forest for each taxonomy type.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional rotating log file. Console-only logging if None.",
    )

    @field_validator("default_type", mode="before")
    @classmethod
    def _coerce_type(cls, v: object) -> TaxonomyType:
        return coerce_taxonomy_type(v)

    @field_validator("taxonomy_files", mode="before")
    @classmethod
    def _coerce_file_keys(cls, v: object) -> object:
        if isinstance(v, dict):
            return {coerce_taxonomy_type(k): p for k, p in v.items()}
        return v

    @model_validator(mode="after")
    def _validate(self) -> "BrowserConfig":
        if self.default_type not in self.taxonomy_files:
            raise ValueError(f"taxonomy_files has no entry for default_type={self.default_type.value!r}")
        return self
