"""Role-scoped REST API services sharing one ``ApiClient``."""

from .admin import AdminApi
from .client import ApiClient
from .librarian import LibrarianApi
from .parent import ParentApi
from .principal import PrincipalApi
from .registrar import RegistrarApi
from .shared import SharedApi
from .student import StudentApi
from .teacher import TeacherApi

__all__ = [
    "AdminApi",
    "ApiClient",
    "LibrarianApi",
    "ParentApi",
    "PrincipalApi",
    "RegistrarApi",
    "SharedApi",
    "StudentApi",
    "TeacherApi",
]
