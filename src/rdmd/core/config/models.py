"""
Configuration data models for rdmd.

These models define the structure of .rdmd.json and ~/.config/rdmd/config.json
files, with validation and type safety via Pydantic.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RdmdConfig(BaseModel):
    """
    Launcher defaults.

    Supplies the values rdmd falls back on when the command line does not
    name them: the compiler to invoke and the packages never rebuilt from
    source.

    Example:
        >>> config = RdmdConfig(default_compiler="ldmd2")
        >>> config.default_exclusions
        ['std', 'etc', 'core']
    """
    default_compiler: str = Field(
        default="dmd",
        min_length=1,
        description="Compiler name or path used when --compiler is not given"
    )
    default_exclusions: list[str] = Field(
        default_factory=lambda: ["std", "etc", "core"],
        description="Package name patterns excluded from dependency builds"
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        frozen=True,
    )

    @field_validator('default_exclusions', mode='before')
    @classmethod
    def split_exclusions(cls, v: str | list[str]) -> list[str]:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v
