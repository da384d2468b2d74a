import argparse
from dataclasses import dataclass

from .settings import SETTINGS


@dataclass
class Settings:
    api_url: str
    timeout: float
    locale: str


def parse_args(argv: list[str] | None = None) -> Settings:
    """Command-line overrides on top of the environment-driven ``SETTINGS``.

    Run through streamlit as ``streamlit run streamlit_app.py -- --api-url ...``.
    """
    parser = argparse.ArgumentParser(description="Plant disease detection client configuration")
    parser.add_argument(
        "--api-url",
        dest="api_url",
        help="Base URL of the inference service",
        default=SETTINGS.api_url,
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        type=float,
        help="Request timeout in seconds",
        default=SETTINGS.request_timeout_sec,
    )
    parser.add_argument(
        "--locale",
        dest="locale",
        help="Initial UI language code (en, hi, te)",
        default=SETTINGS.default_locale,
    )

    # Use parse_known_args so that streamlit can pass its own flags through
    # without this parser failing on them.
    args = parser.parse_known_args(argv)[0]

    if not args.api_url:
        parser.error("You must provide --api-url or set PLANT_API_URL in environment.")

    return Settings(
        api_url=args.api_url.rstrip("/"),
        timeout=args.timeout,
        locale=args.locale,
    )
