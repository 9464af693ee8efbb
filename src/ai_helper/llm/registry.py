import logging
from typing import Callable, Dict, List, Optional, Type

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, Type] = {}


def register_backend(name: str) -> Callable[[Type], Type]:
    """Decorator to register an LLM client class under a backend name."""
    def decorator(cls: Type) -> Type:
        _REGISTRY[name] = cls
        return cls
    return decorator


def get_backend(name: str) -> Optional[Type]:
    """Return the client class for a given backend name."""
    return _REGISTRY.get(name)


def list_backends() -> List[str]:
    """Return a sorted list of registered backend names."""
    return sorted(_REGISTRY.keys())


def create_client(settings):
    """
    Build the client for settings.backend.

    Each registered class exposes `from_settings(settings)`.
    """
    cls = get_backend(settings.backend)
    if cls is None:
        raise ValueError(
            f"Unsupported backend: {settings.backend}. "
            f"Available backends: {', '.join(list_backends())}"
        )
    logger.debug("Creating %s client", settings.backend)
    return cls.from_settings(settings)
