import logging

import dash
from dash import Dash, Output, Input, State
import dash_mantine_components as dmc

from query.config import LOG_LEVEL

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# DMC 2.x renders on React 18
try:
    from dash._dash_renderer import _set_react_version
    _set_react_version("18.2.0")
except (ImportError, AttributeError):
    pass

EXPECTED_DASH = "2.14."
EXPECTED_DMC = "2.4."


def check_versions():
    dash_version = dash.__version__
    dmc_version = getattr(dmc, "__version__", "unknown")
    if not (dash_version.startswith(EXPECTED_DASH) and dmc_version.startswith(EXPECTED_DMC)):
        raise RuntimeError(
            f"Unsupported UI stack: need Dash {EXPECTED_DASH}x with DMC {EXPECTED_DMC}x, "
            f"got Dash {dash_version} and DMC {dmc_version}. Reinstall from pyproject.toml."
        )


check_versions()

APP_TITLE = "Inventory Dashboard"
FONT_STACK = "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"
NAVBAR_WIDTH = 240
HEADER_HEIGHT = 60

NAV_LINKS = [
    ("Dashboard", "/"),
    ("Inventory", "/inventory"),
    ("Orders", "/orders"),
    ("Suppliers", "/suppliers"),
    ("Reports", "/reports"),
    ("Analytics", "/analytics"),
    ("Low Stock Alerts", "/alerts"),
    ("Settings", "/settings"),
]

app = Dash(__name__, use_pages=True, suppress_callback_exceptions=True, title=APP_TITLE)

# Expose Flask server for Gunicorn
server = app.server


def sidebar_links():
    return [
        dmc.NavLink(label=label, href=href, variant="subtle", fw=500)
        for label, href in NAV_LINKS
    ]


def _header():
    return dmc.AppShellHeader(
        dmc.Group(
            [
                dmc.Burger(id="nav-burger", opened=False, size="sm", hiddenFrom="sm"),
                dmc.Title(APP_TITLE, order=4, ml="md", visibleFrom="sm"),
            ],
            h="100%",
            px="md",
            align="center",
        )
    )


def _navbar():
    return dmc.AppShellNavbar(
        dmc.Stack([dmc.Title(APP_TITLE, order=3), dmc.Divider(), *sidebar_links()], gap="sm"),
        id="app-navbar",
        p="md",
    )


def build_layout():
    shell = dmc.AppShell(
        [
            _header(),
            _navbar(),
            dmc.AppShellMain(
                dmc.Container(dash.page_container, size="responsive", px="md", py="lg"),
            ),
        ],
        id="appshell",
        padding="sm",
        navbar={
            "width": NAVBAR_WIDTH,
            "breakpoint": "sm",
            "collapsed": {"mobile": True, "desktop": False},
        },
        header={"height": HEADER_HEIGHT, "collapseOffset": HEADER_HEIGHT},
    )
    theme = {
        "fontFamily": FONT_STACK,
        "headings": {"fontFamily": FONT_STACK, "fontWeight": "600"},
    }
    return dmc.MantineProvider(shell, theme=theme)


app.layout = build_layout()


@app.callback(
    Output("appshell", "navbar"),
    Input("nav-burger", "opened"),
    State("appshell", "navbar"),
)
def toggle_navbar(opened, navbar):
    # Burger only shows below the sm breakpoint; desktop stays expanded
    navbar["collapsed"] = {"mobile": not opened, "desktop": False}
    logger.debug(f"Navbar toggled: collapsed.mobile={not opened}")
    return navbar


if __name__ == '__main__':
    app.run(debug=True)
