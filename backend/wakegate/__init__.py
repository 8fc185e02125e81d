"""wakegate — Wake-on-LAN on HTTP request."""

__version__ = "0.1.0"
