"""Maintenance mode: per-request config derivation, gate rule and page rendering."""

from collections.abc import Mapping
from datetime import date
from html import escape
from string import Template

from pydantic import BaseModel, ConfigDict

from isam_gateway.config import parse_bool, read_first_env_source, read_first_env_value

MAINTENANCE_BOOLEAN_KEYS = ("MAINTENANCE_MODE", "VITE_MAINTENANCE_MODE")
MAINTENANCE_HEADLINE_KEYS = ("MAINTENANCE_HEADLINE", "VITE_MAINTENANCE_HEADLINE")
MAINTENANCE_MESSAGE_KEYS = ("MAINTENANCE_MESSAGE", "VITE_MAINTENANCE_MESSAGE")
MAINTENANCE_CONTACT_EMAIL_KEYS = (
    "MAINTENANCE_CONTACT_EMAIL",
    "VITE_MAINTENANCE_CONTACT_EMAIL",
)

FALLBACK_HEADLINE = "Scheduled Platform Update"
FALLBACK_MESSAGE = (
    "ISAM is improving the web experience. We will be back online shortly."
)

# Served even while maintenance is on: the maintenance page itself links it.
MAINTENANCE_ASSET_ALLOW_LIST = frozenset({"/img/isam-logo.png"})

GATED_METHODS = frozenset({"GET", "HEAD"})

MAINTENANCE_HEADER = "X-Maintenance-Mode"
MAINTENANCE_CACHE_CONTROL = "no-store, no-cache, must-revalidate"


class MaintenanceConfig(BaseModel):
    """Maintenance settings resolved from the environment."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    source_var: str | None = None
    source_value: str = ""
    headline: str = FALLBACK_HEADLINE
    message: str = FALLBACK_MESSAGE
    contact_email: str = ""

    @property
    def header_value(self) -> str:
        """Value for the ``X-Maintenance-Mode`` response header."""
        return "on" if self.enabled else "off"


def compute_maintenance_config(env: Mapping[str, str]) -> MaintenanceConfig:
    """Derive the maintenance config from an environment mapping.

    Pure function: call it once per request with ``os.environ`` so that
    configuration changes apply without a restart.

    Args:
        env: Environment mapping

    Returns:
        Maintenance configuration
    """
    source_var, source_value = read_first_env_source(env, MAINTENANCE_BOOLEAN_KEYS)

    return MaintenanceConfig(
        enabled=parse_bool(source_value) if source_var else False,
        source_var=source_var,
        source_value=source_value,
        headline=read_first_env_value(
            env, MAINTENANCE_HEADLINE_KEYS, FALLBACK_HEADLINE
        ),
        message=read_first_env_value(env, MAINTENANCE_MESSAGE_KEYS, FALLBACK_MESSAGE),
        contact_email=read_first_env_value(env, MAINTENANCE_CONTACT_EMAIL_KEYS, ""),
    )


def should_intercept(config: MaintenanceConfig, method: str, pathname: str) -> bool:
    """Whether a request must be answered with the maintenance page.

    Only reads are gated; mutating verbs always pass through.
    """
    return (
        config.enabled
        and method.upper() in GATED_METHODS
        and pathname not in MAINTENANCE_ASSET_ALLOW_LIST
    )


_PAGE_TEMPLATE = Template(
    """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>$headline</title>
    <style>
      :root {
        --bg: #f6f7f8;
        --panel: #ffffff;
        --text: #171717;
        --muted: #525252;
        --border: #e5e5e5;
        --accent: #0a0a0a;
      }
      * { box-sizing: border-box; }
      body {
        margin: 0;
        min-height: 100vh;
        display: grid;
        place-items: center;
        padding: 2rem;
        background: var(--bg);
        color: var(--text);
        font-family: "Plus Jakarta Sans", "Open Sans", sans-serif;
      }
      .card {
        width: min(760px, 100%);
        border: 1px solid var(--border);
        border-radius: 24px;
        background: var(--panel);
        padding: 2.8rem;
        box-shadow: 0 25px 40px rgb(0 0 0 / 10%);
        text-align: center;
      }
      .logo { width: min(220px, 50%); margin: 0 auto 1rem; }
      .kicker {
        margin: 0 0 0.9rem;
        letter-spacing: 0.2em;
        text-transform: uppercase;
        font-size: 0.82rem;
        color: var(--muted);
      }
      h1 { margin: 0; font-size: clamp(2rem, 5vw, 3rem); line-height: 1.1; color: var(--accent); }
      .message { margin: 1rem auto 0; color: var(--muted); line-height: 1.7; max-width: 56ch; }
      .contact { margin: 1.35rem 0 0; color: var(--muted); }
      a { color: var(--accent); text-underline-offset: 3px; }
      .footer { margin: 1.25rem 0 0; font-size: 0.85rem; color: #737373; }
      @media (max-width: 680px) {
        .card { padding: 1.8rem; }
        .logo { width: min(180px, 60%); }
      }
    </style>
  </head>
  <body>
    <main class="card" aria-labelledby="maintenance-title">
      <img class="logo" src="/img/isam-logo.png" alt="ISAM logo" />
      <p class="kicker">ISAM</p>
      <h1 id="maintenance-title">$headline</h1>
      <p class="message">$message</p>
      $contact_section
      <p class="footer">&copy; $year ISAM. All rights reserved.</p>
    </main>
  </body>
</html>"""
)


def render_maintenance_page(config: MaintenanceConfig, year: int | None = None) -> str:
    """Render the standalone maintenance HTML page.

    Args:
        config: Maintenance configuration
        year: Copyright year (default: current year)

    Returns:
        HTML document with every configured value escaped
    """
    contact_email = config.contact_email.strip()
    contact_section = ""
    if contact_email:
        safe_email = escape(contact_email)
        contact_section = (
            f'<p class="contact">Questions? '
            f'<a href="mailto:{safe_email}">{safe_email}</a></p>'
        )

    return _PAGE_TEMPLATE.substitute(
        headline=escape(config.headline or FALLBACK_HEADLINE),
        message=escape(config.message or FALLBACK_MESSAGE),
        contact_section=contact_section,
        year=year or date.today().year,
    )
