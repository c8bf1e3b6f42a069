"""
Error taxonomy shared by the validator, the services and the API layer

Services raise these; the API layer translates each kind to exactly one
response classification.
"""
import enum
from typing import List, Optional, Sequence


class FailureClass(str, enum.Enum):
    """Status class of a rejected payload"""
    UNPROCESSABLE = "unprocessable"
    BAD_REQUEST = "bad_request"


class AppError(Exception):
    """Base class for client-visible errors"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ResourceNotFound(AppError):
    """Primary-key lookup miss"""


class DependentResourceNotFound(AppError):
    """A foreign reference in a create/update payload does not resolve"""

    def __init__(self, message: str, kind: str, resource_id):
        super().__init__(message)
        self.kind = kind
        self.resource_id = resource_id


class ResourceAlreadyExists(AppError):
    """Uniqueness constraint violation"""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class InvalidPayload(AppError):
    """A request payload was rejected by the request validator"""

    def __init__(self, failures: Sequence, failure_class: FailureClass):
        self.failures: List = list(failures)
        self.failure_class = failure_class
        super().__init__("; ".join(f.message for f in self.failures))

    @property
    def messages(self) -> List[str]:
        return [f.message for f in self.failures]

    def fields(self) -> List[Optional[str]]:
        return [f.field for f in self.failures]
