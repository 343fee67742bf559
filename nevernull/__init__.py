from .handle import Handle, nn, wrap
from .lookup import lookup
from .logging import trace, suspend

__version__ = "0.1"
