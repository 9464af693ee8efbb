"""
AI Helper - a thin wrapper for sending single prompts to a hosted language model.
"""

__version__ = "0.1.0"

from .errors import MissingCredentialError
from .helper import AIHelper

__all__ = ["AIHelper", "MissingCredentialError", "__version__"]
