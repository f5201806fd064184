"""
Service layer abstraction.

``CommandStore`` owns the persisted records; ``CommandService``
enforces the CRUD rules on top of it.  API handlers only talk to the
service.
"""
