# main.py
from blog_globals.adapters.environment_adapters import (
    DotEnvEnvironmentAdapter,
    OsEnvironmentAdapter,
)
from blog_globals.adapters.logging_adapter import LoggingAdapter
from blog_globals.core.interfaces.environment import EnvironmentPort
from blog_globals.core.logging_config import configure_logging
from blog_globals.core.managers.global_data_provider import GlobalDataProvider
from blog_globals.core.models.site_identity import SiteDefaults, SiteIdentity
from blog_globals.core.settings import BlogSettings, app_settings, set_logger


# main lives at the outermost layer (not in core)
# `configure` is the one-time startup wiring; `build_provider` and
# `get_global_data` run per call and leave global state alone.

def configure(settings: BlogSettings | None = None) -> None:
    """Install logging sinks and the package logger. Call once at startup."""
    settings = settings or app_settings

    configure_logging(settings.BLOG_LOG_LEVEL)
    logger = LoggingAdapter("blog_globals", settings.BLOG_LOG_LEVEL)
    set_logger(logger)

    if settings.BLOG_PRINT_SETTINGS:
        settings.print_settings(logger)


def build_provider(
    settings: BlogSettings | None = None,
    environment: EnvironmentPort | None = None,
    defaults: SiteDefaults | None = None,
) -> GlobalDataProvider:
    settings = settings or app_settings

    if environment is None:
        if settings.BLOG_ENV_FILE is not None:
            environment = DotEnvEnvironmentAdapter(settings.BLOG_ENV_FILE)
        else:
            environment = OsEnvironmentAdapter()

    return GlobalDataProvider(environment, defaults=defaults)


def get_global_data() -> SiteIdentity:
    """Entry point for the renderer: resolve the site identity from the environment."""
    return build_provider().get_site_identity()
