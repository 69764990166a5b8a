"""Per-call decoding options."""

from pydantic import BaseModel, ConfigDict, Field

from geojson_types.config import MAX_NESTING_DEPTH


class DecodeOptions(BaseModel):
    """Options threaded through every parse/decode call."""

    model_config = ConfigDict(frozen=True)

    raise_on_error: bool = Field(
        default=True,
        description="Raise decode errors; when false, parse() logs them and returns None",
    )
    max_depth: int = Field(
        default=MAX_NESTING_DEPTH,
        ge=1,
        description="Maximum nesting of GeoJSON objects and property values",
    )


DEFAULT_OPTIONS = DecodeOptions()
