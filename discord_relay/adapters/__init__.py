"""Adapters — Discord, HTTP webhook, and web server edges."""
