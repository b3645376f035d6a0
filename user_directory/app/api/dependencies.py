"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from user_directory.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` bound to the application handling the request."""
    return request.app.state.user_service
