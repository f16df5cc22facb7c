"""PN-MAIN: a small web server with a home page and an echo API."""

__version__ = "0.1.0"
