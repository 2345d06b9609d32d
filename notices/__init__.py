"""Dismissible admin notices."""
