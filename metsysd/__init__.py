"""metsysd - generate and install systemd service units."""

__version__ = "0.1.0"
