from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the Detective Quest game."""

    repo_root: Path = Path(__file__).resolve().parent.parent
    templates_dir: str = "mysteries/templates"
    schemas_dir: str = "schemas"
    case_template: str = "mansion_case"

    # Evidence indexing
    table_size: int = Field(10, ge=1)
    accusation_threshold: int = Field(2, ge=1)

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="DETECTIVE_QUEST_")

    @property
    def templates_path(self) -> Path:
        return self.repo_root / self.templates_dir

    @property
    def schemas_path(self) -> Path:
        return self.repo_root / self.schemas_dir

    @property
    def case_schema_path(self) -> Path:
        return self.schemas_path / "case.schema.json"

    def template_path(self, name: str) -> Path:
        return self.templates_path / f"{name}.json"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
