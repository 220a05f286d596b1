"""Pydantic v2 schemas shared between the API, the state store and the CLI."""

from .sessions import *  # noqa: F401,F403
from .metrics import *  # noqa: F401,F403
from .listings import *  # noqa: F401,F403
