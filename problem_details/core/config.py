from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Status resolution: when set, unknown wire codes fail instead of being
    # synthesized as ad hoc entries.
    strict_status: bool = Field(default=False, alias="PROBLEM_STRICT_STATUS")

    # Wire format
    include_cause: bool = Field(default=False, alias="PROBLEM_INCLUDE_CAUSE")
    json_indent: int | None = Field(default=None, alias="PROBLEM_JSON_INDENT")

    # HTTP responses
    media_type: str = Field(
        default="application/problem+json", alias="PROBLEM_MEDIA_TYPE"
    )

    @field_validator("json_indent", mode="before")
    @classmethod
    def empty_str_to_none_int(cls, v: str | int | None) -> str | int | None:
        """Convert empty strings to None; anything else is left to int parsing."""
        if v == "":
            return None
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
