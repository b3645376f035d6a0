"""
Application package initializer.

The service is split into small layers: ``core`` (configuration,
logging, errors and the in‑memory store), ``schemas`` (request and
response models), ``services`` (business rules) and ``api`` (HTTP
routes).  Routes only translate HTTP into service calls.
"""

from .main import app, create_app  # noqa: F401
