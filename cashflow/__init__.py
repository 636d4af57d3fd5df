"""Mini README: Core package initializer for the cash-flow report tools.

The pipeline runs parse → filter → project → summarise. Sub-packages
``ledger``, ``filtering``, ``projection`` and ``reporting`` hold each stage;
this module only re-exports the logger factory.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
