from .config import DEFAULT_EXCLUDE, GenerationConfig, ReviewConfig

__all__ = [
    "DEFAULT_EXCLUDE",
    "GenerationConfig",
    "ReviewConfig",
]
