"""FastAPI REST API for pool coping and paving layouts.

This module provides a REST API for laying coping, filling paving areas,
extending coping toward an edited boundary and validating configurations.

Usage:
    uvicorn poolpave.web:app --reload
"""

from poolpave.web.app import app, create_app

__all__ = ["app", "create_app"]
