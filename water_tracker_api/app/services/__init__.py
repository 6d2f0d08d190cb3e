"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services hold
no state of their own: every method receives the shared
:class:`~water_tracker_api.app.core.db.Database` and performs a single
statement against it.
"""
