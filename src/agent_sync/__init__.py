"""Marketplace agent feed to HubSpot custom object sync."""

__version__ = "0.1.0"
