"""Action exceptions.

Raised by stores and registries; the Action Service converts the domain
ones into outcomes.
"""

from .action_already_closed import ActionAlreadyClosedError
from .action_not_found import ActionNotFoundError
from .action_persistence_error import ActionPersistenceError
from .service_not_recognized import ServiceNotRecognizedError

__all__ = [
    "ActionAlreadyClosedError",
    "ActionNotFoundError",
    "ActionPersistenceError",
    "ServiceNotRecognizedError",
]
