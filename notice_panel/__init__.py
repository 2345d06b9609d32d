"""Django project package for the notice panel service."""
