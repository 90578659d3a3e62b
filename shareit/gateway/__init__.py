"""Validating gateway in front of the ShareIt server."""
