"""
Reflex application entry point for the search-select demo.

This module initializes the Reflex app and defines the bill entry page.
"""

import reflex as rx

from search_select import config
from search_select.components.bill_form import bill_form
from search_select.lib import logs
from search_select.state import APP_SUBTITLE, APP_TITLE

LOG = logs.logger(__file__)

LOG.info("SEARCH_SELECT_SOURCE: %s", config.SOURCE_KIND)
if config.SOURCE_KIND == "http":
    LOG.info("SEARCH_SELECT_API_URL: %s", config.API_URL)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the hero text area at the top of the page."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component with header and bill form.
    """
    return rx.box(
        rx.box(
            page_header(),
            bill_form(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(index, title=APP_TITLE)


def main() -> None:
    """Entrypoint used by `search-select-demo`."""
    # In production, use `reflex run` instead
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--frontend-port", str(config.APP_PORT)])


if __name__ == "__main__":
    main()
