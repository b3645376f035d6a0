"""
HTTP layer of the application.

``router`` aggregates the endpoint modules in ``endpoints``; the
application includes it without a prefix because the public paths
(``/user`` and ``/api/users``) are fixed.
"""
