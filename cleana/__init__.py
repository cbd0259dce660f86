from .classify import Kind, classify
from .context import cleaning_context
from .decorator import cleaner
from .equality import deep_equal
from .options import CleanOptions, Config, normalize_options
from .process import clean
from .sentinels import MISSING, UNDEFINED
from .types import REMOVED, Kept, Removed

__all__ = [
    "clean",
    "cleaner",
    "cleaning_context",
    "CleanOptions",
    "Config",
    "normalize_options",
    "classify",
    "Kind",
    "deep_equal",
    "UNDEFINED",
    "MISSING",
    "Kept",
    "Removed",
    "REMOVED",
]
