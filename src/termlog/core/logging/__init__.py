# src/termlog/core/logging/
# ├─ __init__.py            # public API: setup_logging, make_dict_config, ColorFormatter
# ├─ builder.py             # make_dict_config(settings) + setup_logging(settings)
# ├─ formatters.py          # ColorFormatter
# └─ handlers.py            # console handler factory for dictConfig

from .builder import setup_logging, make_dict_config
from .formatters import ColorFormatter

__all__ = ["setup_logging", "make_dict_config", "ColorFormatter"]
