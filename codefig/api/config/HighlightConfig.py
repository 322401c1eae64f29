"""Highlight configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound


class HighlightConfig(BaseModel):
    """Pygments settings for highlighted code figures."""

    model_config = ConfigDict(extra="forbid")

    css_class: str = Field("highlight", min_length=1, description="CSS class on the highlighter output")
    style: str = Field("default", description="Pygments style used for stylesheets")
    default_lexer: str = Field("text", description="Lexer used when no filetype resolves")

    @field_validator("style")
    @classmethod
    def validate_style(cls, v: str) -> str:
        try:
            get_style_by_name(v)
        except ClassNotFound as e:
            raise ValueError(f"Unknown Pygments style: {v}") from e
        return v

    @field_validator("default_lexer")
    @classmethod
    def validate_default_lexer(cls, v: str) -> str:
        try:
            get_lexer_by_name(v)
        except ClassNotFound as e:
            raise ValueError(f"Unknown Pygments lexer: {v}") from e
        return v
