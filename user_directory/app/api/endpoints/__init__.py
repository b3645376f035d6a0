"""
Endpoint modules.  Each defines an ``APIRouter`` that ``router.py``
mounts at its public path.
"""
