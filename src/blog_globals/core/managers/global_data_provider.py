# blog_globals/core/managers/global_data_provider.py
from __future__ import annotations

from typing import Dict, Optional

from blog_globals.core.exceptions import DecodingError
from blog_globals.core.interfaces.environment import EnvironmentPort
from blog_globals.core.interfaces.logging import LoggingPort
from blog_globals.core.interfaces.site_info import SiteInfoPort
from blog_globals.core.models.site_identity import SiteDefaults, SiteIdentity, SiteVariable
from blog_globals.core.settings import get_logger
from blog_globals.core.utils.percent_decoding import MalformedEncodingError, decode_uri_component


# --- Resolution steps -----------------------------------------------------
# Each variable runs through: lookup -> presence check -> decode -> default.

def lookup_variable(environment: EnvironmentPort, variable: SiteVariable) -> Optional[str]:
    return environment.get(variable.value)


def is_present(raw: Optional[str]) -> bool:
    """A value counts only when it is a non-empty string; "" means unset."""
    return raw is not None and raw != ""


def decode_value(variable: SiteVariable, raw: str) -> str:
    """Percent-decode `raw`, raising DecodingError that names the variable."""
    try:
        return decode_uri_component(raw)
    except MalformedEncodingError as exc:
        raise DecodingError(variable.value, raw, diagnostic=str(exc)) from exc


def resolve_field(
    environment: EnvironmentPort,
    variable: SiteVariable,
    default: str,
) -> tuple[str, bool]:
    """Resolve one variable.

    Returns the value and whether it came from the environment.
    """
    raw = lookup_variable(environment, variable)
    if not is_present(raw):
        return default, False
    return decode_value(variable, raw), True


class GlobalDataProvider(SiteInfoPort):
    """Builds the SiteIdentity from an injected environment source.

    Malformed values fail fast: the DecodingError propagates so the site
    build stops instead of rendering a half-decoded title.
    """

    def __init__(
        self,
        environment: EnvironmentPort,
        defaults: SiteDefaults | None = None,
        logger: LoggingPort | None = None,
    ) -> None:
        self.environment = environment
        self.defaults = defaults or SiteDefaults()
        self.logger = logger or get_logger()

    def get_site_identity(self) -> SiteIdentity:
        values: Dict[str, str] = {}
        for variable in SiteVariable:
            try:
                value, from_env = resolve_field(
                    self.environment, variable, self.defaults.for_variable(variable)
                )
            except DecodingError as exc:
                self.logger.error("Cannot resolve %s: %s", exc.variable, exc.diagnostic)
                raise
            self.logger.debug(
                "%s resolved from %s", variable.value, "environment" if from_env else "default"
            )
            values[variable.field_name] = value
        return SiteIdentity(**values)

    def get_global_data(self) -> Dict[str, str]:
        """Shortcut returning the renderer-facing dict."""
        return self.get_site_identity().to_global_data()
