"""SAB waitlist server: buyer queue, steals accounting and live server status."""

__version__ = "1.0.0"
