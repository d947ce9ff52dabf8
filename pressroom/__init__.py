"""Pressroom: user signup/login and article publishing API."""

__version__ = "1.0.0"
