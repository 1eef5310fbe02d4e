"""Core abstractions.

- Action: base action type wrapping a controller method
- ActionRole: base class for composable around-style behaviors
- Context: request-scoped state shared by roles and actions
- compose_roles: build the around chain for a list of role instances
"""

from .action import Action
from .context import Context
from .role import ActionRole, Next, compose_roles

__all__ = [
    "Action",
    "ActionRole",
    "Context",
    "Next",
    "compose_roles",
]
