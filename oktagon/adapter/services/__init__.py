from .app_service import OktaAppService
from .group_service import OktaGroupService
from .organisation_service import OktaOrganisationService
from .user_service import OktaUserService

__all__ = [
    "OktaAppService",
    "OktaGroupService",
    "OktaOrganisationService",
    "OktaUserService",
]
