"""Tests for maintenance mode."""

import pytest

from isam_gateway.core.maintenance import (
    FALLBACK_HEADLINE,
    FALLBACK_MESSAGE,
    MaintenanceConfig,
    compute_maintenance_config,
    render_maintenance_page,
    should_intercept,
)


def test_defaults_without_env() -> None:
    """Test an empty environment disables maintenance."""
    config = compute_maintenance_config({})

    assert config.enabled is False
    assert config.source_var is None
    assert config.source_value == ""
    assert config.headline == FALLBACK_HEADLINE
    assert config.message == FALLBACK_MESSAGE
    assert config.contact_email == ""
    assert config.header_value == "off"


def test_primary_key_wins() -> None:
    """Test the primary key takes precedence over its alias."""
    config = compute_maintenance_config(
        {
            "MAINTENANCE_MODE": "off",
            "VITE_MAINTENANCE_MODE": "on",
            "MAINTENANCE_HEADLINE": "Primary",
            "VITE_MAINTENANCE_HEADLINE": "Alias",
        }
    )

    assert config.enabled is False
    assert config.source_var == "MAINTENANCE_MODE"
    assert config.source_value == "off"
    assert config.headline == "Primary"


def test_blank_primary_falls_through_to_alias() -> None:
    """Test blank values are skipped."""
    config = compute_maintenance_config(
        {
            "MAINTENANCE_MODE": "  ",
            "VITE_MAINTENANCE_MODE": "'true'",
            "MAINTENANCE_MESSAGE": "",
            "VITE_MAINTENANCE_MESSAGE": "  Back soon  ",
            "VITE_MAINTENANCE_CONTACT_EMAIL": "ops@isam-tech.com",
        }
    )

    assert config.enabled is True
    assert config.source_var == "VITE_MAINTENANCE_MODE"
    assert config.source_value == "'true'"
    assert config.message == "Back soon"
    assert config.contact_email == "ops@isam-tech.com"
    assert config.header_value == "on"


@pytest.mark.parametrize(
    ("method", "pathname", "expected"),
    [
        ("GET", "/", True),
        ("HEAD", "/en/about-us", True),
        ("get", "/any/other/path", True),
        ("POST", "/", False),
        ("DELETE", "/api/messages", False),
        ("GET", "/img/isam-logo.png", False),
    ],
)
def test_should_intercept_when_enabled(
    method: str, pathname: str, expected: bool
) -> None:
    """Test the gate only intercepts reads of non allow-listed paths."""
    config = MaintenanceConfig(enabled=True)

    assert should_intercept(config, method, pathname) is expected


def test_should_not_intercept_when_disabled() -> None:
    """Test nothing is intercepted when maintenance is off."""
    assert should_intercept(MaintenanceConfig(enabled=False), "GET", "/") is False


def test_render_page_escapes_values() -> None:
    """Test configured values cannot inject markup."""
    config = MaintenanceConfig(
        enabled=True,
        headline="<script>alert(1)</script>",
        message='Tom & Jerry "quoted"',
        contact_email="a'b@isam-tech.com",
    )

    html = render_maintenance_page(config, year=2026)

    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "Tom &amp; Jerry &quot;quoted&quot;" in html
    assert 'href="mailto:a&#x27;b@isam-tech.com"' in html
    assert "&copy; 2026 ISAM" in html
    assert 'src="/img/isam-logo.png"' in html


def test_render_page_without_contact() -> None:
    """Test the contact paragraph is omitted without an email."""
    html = render_maintenance_page(MaintenanceConfig(headline="Upgrading"))

    assert "<title>Upgrading</title>" in html
    assert "mailto:" not in html


def test_render_page_falls_back_on_empty_values() -> None:
    """Test empty headline and message use the defaults."""
    html = render_maintenance_page(MaintenanceConfig(headline="", message=""))

    assert FALLBACK_HEADLINE in html
    assert FALLBACK_MESSAGE in html
