from .app_service import IAppService
from .group_service import IGroupService
from .organisation_service import IOrganisationService
from .user_service import IUserService

__all__ = [
    "IAppService",
    "IGroupService",
    "IOrganisationService",
    "IUserService",
]
