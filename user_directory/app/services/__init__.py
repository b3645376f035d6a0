"""
Service layer abstraction.

Services encapsulate the business rules of a domain and receive their
storage explicitly, so the in‑memory store could be swapped for a
database without changing the API handlers.
"""
