"""Built-in action roles.

This package is the default fallback prefix (``actionrole.roles.``), so a
bare name like ``Logging`` resolves here unless the application defines a
role of the same name.
"""

from .logging import Logging
from .method import RequireMethod
from .timeout import Timeout

__all__ = ["Logging", "RequireMethod", "Timeout"]
