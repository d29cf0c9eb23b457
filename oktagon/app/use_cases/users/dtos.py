"""
User Use Case DTOs
"""

from pydantic import BaseModel

from oktagon.domain.entities import User


class CreateUserResponse(BaseModel):
    """Response for create user use case"""

    user: User
    password: str
