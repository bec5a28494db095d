from .base import *  # noqa: F401,F403
from .events import *  # noqa: F401,F403
from .ninja import *  # noqa: F401,F403
from .observability import *  # noqa: F401,F403
from .stats import *  # noqa: F401,F403
