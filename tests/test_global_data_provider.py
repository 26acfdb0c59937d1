"""Unit tests for the global data provider.

Covers the per-variable fallback chain (lookup, presence, decode, default)
and the fail-fast policy for malformed percent-encoding.
"""

import logging

import pytest
from pydantic import ValidationError

from blog_globals.adapters.environment_adapters import MappingEnvironmentAdapter
from blog_globals.adapters.logging_adapter import LoggingAdapter
from blog_globals.core.exceptions import DecodingError
from blog_globals.core.managers.global_data_provider import (
    GlobalDataProvider,
    decode_value,
    is_present,
    lookup_variable,
    resolve_field,
)
from blog_globals.core.models.site_identity import SiteDefaults, SiteIdentity, SiteVariable
from blog_globals.core.settings import NoOpLogger


DEFAULT_IDENTITY = SiteIdentity(
    name="PowctoRhan",
    blog_title="Learing Notes",
    footer_text="DRIVEN BY PASSION",
)


# --- Test Fixtures ---

@pytest.fixture
def make_provider():
    """Build a provider over an injected mapping."""
    def _make(values, defaults=None, logger=None):
        return GlobalDataProvider(
            MappingEnvironmentAdapter(values),
            defaults=defaults,
            logger=logger or NoOpLogger(),
        )
    return _make


# --- Resolution steps ---

def test_lookup_variable_reads_by_variable_name():
    env = MappingEnvironmentAdapter({"BLOG_TITLE": "x"})
    assert lookup_variable(env, SiteVariable.BLOG_TITLE) == "x"
    assert lookup_variable(env, SiteVariable.BLOG_NAME) is None


@pytest.mark.parametrize("raw,expected", [
    (None, False),
    ("", False),
    (" ", True),
    ("Notes", True),
])
def test_is_present(raw, expected):
    assert is_present(raw) is expected


def test_decode_value_names_variable_on_failure():
    with pytest.raises(DecodingError) as excinfo:
        decode_value(SiteVariable.BLOG_FOOTER_TEXT, "%")
    assert excinfo.value.variable == "BLOG_FOOTER_TEXT"
    assert excinfo.value.raw_value == "%"
    assert "BLOG_FOOTER_TEXT" in str(excinfo.value)


def test_resolve_field_reports_source():
    env = MappingEnvironmentAdapter({"BLOG_NAME": "Ann"})
    assert resolve_field(env, SiteVariable.BLOG_NAME, "dflt") == ("Ann", True)
    assert resolve_field(env, SiteVariable.BLOG_TITLE, "dflt") == ("dflt", False)


# --- Provider ---

def test_all_unset_yields_defaults(make_provider):
    assert make_provider({}).get_site_identity() == DEFAULT_IDENTITY


def test_all_empty_yields_defaults(make_provider):
    provider = make_provider({
        "BLOG_NAME": "",
        "BLOG_TITLE": "",
        "BLOG_FOOTER_TEXT": "",
    })
    assert provider.get_site_identity() == DEFAULT_IDENTITY


def test_encoded_name_is_decoded(make_provider):
    identity = make_provider({"BLOG_NAME": "%E4%BD%A0%E5%A5%BD"}).get_site_identity()
    assert identity.name == "你好"
    assert identity.blog_title == "Learing Notes"
    assert identity.footer_text == "DRIVEN BY PASSION"


def test_plain_title_passes_through(make_provider):
    identity = make_provider({"BLOG_TITLE": "My Notes"}).get_site_identity()
    assert identity.blog_title == "My Notes"
    assert identity.name == "PowctoRhan"


def test_malformed_footer_raises(make_provider):
    provider = make_provider({"BLOG_FOOTER_TEXT": "%"})
    with pytest.raises(DecodingError) as excinfo:
        provider.get_site_identity()
    assert excinfo.value.variable == "BLOG_FOOTER_TEXT"


def test_invalid_utf8_raises(make_provider):
    with pytest.raises(DecodingError):
        make_provider({"BLOG_NAME": "%FF"}).get_site_identity()


def test_repeated_calls_are_equal(make_provider):
    provider = make_provider({"BLOG_NAME": "A%20B", "BLOG_TITLE": "T"})
    first = provider.get_site_identity()
    second = provider.get_site_identity()
    assert first == second
    assert first is not second


def test_environment_is_not_mutated(make_provider):
    values = {"BLOG_NAME": "A%20B", "BLOG_TITLE": ""}
    make_provider(values).get_site_identity()
    assert values == {"BLOG_NAME": "A%20B", "BLOG_TITLE": ""}


def test_custom_defaults(make_provider):
    defaults = SiteDefaults(name="Someone", blog_title="Blog", footer_text="Bye")
    identity = make_provider({}, defaults=defaults).get_site_identity()
    assert identity == SiteIdentity(name="Someone", blog_title="Blog", footer_text="Bye")


def test_global_data_uses_renderer_keys(make_provider):
    data = make_provider({"BLOG_FOOTER_TEXT": "Fin"}).get_global_data()
    assert data == {
        "name": "PowctoRhan",
        "blogTitle": "Learing Notes",
        "footerText": "Fin",
    }


def test_site_identity_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_IDENTITY.name = "Other"


# --- Logging ---

def test_decoding_failure_is_logged(make_provider, caplog):
    logger = LoggingAdapter("blog_globals.tests", "DEBUG")
    provider = make_provider({"BLOG_TITLE": "%zz"}, logger=logger)
    with caplog.at_level(logging.DEBUG, logger="blog_globals.tests"):
        with pytest.raises(DecodingError):
            provider.get_site_identity()
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "BLOG_TITLE" in errors[0].getMessage()


def test_field_sources_are_logged(make_provider, caplog):
    logger = LoggingAdapter("blog_globals.tests", "DEBUG")
    provider = make_provider({"BLOG_NAME": "Ann"}, logger=logger)
    with caplog.at_level(logging.DEBUG, logger="blog_globals.tests"):
        provider.get_site_identity()
    messages = [r.getMessage() for r in caplog.records]
    assert "BLOG_NAME resolved from environment" in messages
    assert "BLOG_TITLE resolved from default" in messages
