"""HTTP presentation."""

from finplan.presentation.api.app import create_app
from finplan.presentation.api.exception_handlers import setup_exception_handlers

__all__ = ["create_app", "setup_exception_handlers"]
