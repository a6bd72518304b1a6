from .exceptions import LogFormatError
from .load import load_dataset
from .verify import verify_format

__all__ = ["LogFormatError", "load_dataset", "verify_format"]
