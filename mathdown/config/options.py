"""
Renderer options.

The fixed configuration surface handed to the markdown engine and the
math extension. Both models are frozen so a built renderer cannot drift.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


Delimiter = tuple[str, str]


class MathOptions(BaseModel):
    """Delimiters and skip tags for the math extension."""

    model_config = ConfigDict(frozen=True)

    inline_math: tuple[Delimiter, ...] = (("$", "$"), ("\\(", "\\)"))
    display_math: tuple[Delimiter, ...] = (("$$", "$$"), ("\\[", "\\]"))
    skip_html_tags: tuple[str, ...] = (
        "script",
        "noscript",
        "style",
        "textarea",
        "pre",
        "code",
    )

    @field_validator("inline_math", "display_math")
    @classmethod
    def validate_delimiters(cls, v: tuple[Delimiter, ...]) -> tuple[Delimiter, ...]:
        """Reject empty delimiter strings."""
        for opening, closing in v:
            if not opening or not closing:
                raise ValueError("Math delimiters must be non-empty strings")
        return v

    @field_validator("skip_html_tags")
    @classmethod
    def normalize_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Lowercase tag names."""
        return tuple(tag.strip().lower() for tag in v if tag.strip())


class RendererOptions(BaseModel):
    """Engine flags plus math extension options."""

    model_config = ConfigDict(frozen=True)

    html: bool = True
    linkify: bool = True
    typographer: bool = True
    math: MathOptions = Field(default_factory=MathOptions)

    def engine_options(self) -> dict[str, bool]:
        """Options dict in the shape MarkdownIt expects."""
        return {
            "html": self.html,
            "linkify": self.linkify,
            "typographer": self.typographer,
        }
