from enum import StrEnum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class SiteVariable(StrEnum):
    """Environment variables recognized for the site identity."""

    BLOG_NAME = "BLOG_NAME"
    BLOG_TITLE = "BLOG_TITLE"
    BLOG_FOOTER_TEXT = "BLOG_FOOTER_TEXT"

    @property
    def field_name(self) -> str:
        """Name of the SiteIdentity field this variable populates."""
        return _FIELD_BY_VARIABLE[self.value]


_FIELD_BY_VARIABLE = {
    "BLOG_NAME": "name",
    "BLOG_TITLE": "blog_title",
    "BLOG_FOOTER_TEXT": "footer_text",
}


class SiteDefaults(BaseModel):
    """Fallback values used when a variable is unset or empty."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "PowctoRhan"
    blog_title: str = "Learing Notes"
    footer_text: str = "DRIVEN BY PASSION"

    def for_variable(self, variable: SiteVariable) -> str:
        return getattr(self, variable.field_name)


class SiteIdentity(BaseModel):
    """Site name, title and footer text handed to the renderer.

    Built fresh on every call and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str
    blog_title: str = Field(alias="blogTitle")
    footer_text: str = Field(alias="footerText")

    def to_global_data(self) -> Dict[str, str]:
        """Return the template variables keyed the way the renderer expects."""
        return self.model_dump(by_alias=True)
