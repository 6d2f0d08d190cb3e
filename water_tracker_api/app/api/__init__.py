"""
API package containing the HTTP routes.

``router.py`` aggregates the domain routers defined in ``endpoints``
and is included by the application factory in ``main.py``.
"""
