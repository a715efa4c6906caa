"""Validated base-path and asset-origin configuration values."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..assertions import assert_usage
from ..utils.url_utils import is_base_assets


class BaseServerConfig(BaseModel):
    """Server mount path, e.g. ``/app/``."""

    model_config = ConfigDict(frozen=True)

    base: str = Field("/", description="Mount path; starts with '/', no scheme")

    @field_validator("base")
    @classmethod
    def _check_base(cls, value: str) -> str:
        # Imported here: base_path imports the models package
        from ..base_path import validate_base_path

        validate_base_path(value)
        return value

    @property
    def normalized(self) -> str:
        from ..base_path import normalize_base_path

        return normalize_base_path(self.base)


class BaseAssetsConfig(BaseModel):
    """Absolute origin serving static assets, e.g. ``https://cdn.example.com/``."""

    model_config = ConfigDict(frozen=True)

    base: str = Field(..., description="Absolute URL starting with a scheme")

    @field_validator("base")
    @classmethod
    def _check_base(cls, value: str) -> str:
        assert_usage(
            is_base_assets(value),
            f"Wrong `baseAssets` value `{value}`; `baseAssets` should be an absolute URL "
            "such as `https://cdn.example.com/`.",
        )
        return value

    @property
    def normalized(self) -> str:
        from ..base_path import normalize_base_assets

        return normalize_base_assets(self.base)
