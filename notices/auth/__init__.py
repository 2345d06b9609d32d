"""Authentication for the notice panel API."""
