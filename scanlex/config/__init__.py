from .config import ScannerConfig, ENV_SKIP_WHITESPACE, ENV_COMPARE_OPTIONS, ENV_INT_BITS

__all__ = [
    "ScannerConfig",
    "ENV_SKIP_WHITESPACE",
    "ENV_COMPARE_OPTIONS",
    "ENV_INT_BITS",
]
