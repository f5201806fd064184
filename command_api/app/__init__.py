"""
Application package initializer.

The API is organised into small layers: ``core`` (settings, logging,
database plumbing), ``schemas`` (Pydantic payloads), ``services``
(store and business rules) and ``api`` (versioned FastAPI routers).
Use ``main.create_app`` to build an application instance.
"""
