"""Render Swagger/OpenAPI documents into colour-coded Word reports."""

__version__ = "0.1.0"
