"""docspot - locate the function under the cursor and its documentation block."""

try:
    from importlib.metadata import version

    __version__ = version("docspot")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development

from docspot.docstring_updater import splice_documentation
from docspot.locate import locate_function, locate_function_in_file
from docspot.models import FunctionRecord

__all__ = [
    "FunctionRecord",
    "locate_function",
    "locate_function_in_file",
    "splice_documentation",
]
