"""FastAPI dependency injection for layout services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from poolpave.application import LayoutCommand


@lru_cache(maxsize=1)
def get_layout_command() -> LayoutCommand:
    """Get cached LayoutCommand instance."""
    return LayoutCommand()


# Type alias for cleaner endpoint signatures
LayoutCommandDep = Annotated[LayoutCommand, Depends(get_layout_command)]
