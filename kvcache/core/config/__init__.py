"""
Configuration Module

Components:
-----------
- **settings.py**: Pydantic-based configuration with environment variable loading
- **constants.py**: Stage identifiers, TTL unit constants, key separator

Usage:
------
```python
from kvcache.core.config import get_settings

settings = get_settings()
namespace = settings.app.APP_NAME
redis_host = settings.redis.REDIS_HOST
```

Environment Variables:
---------------------
```bash
APP_NAME=shop
REDIS_HOST=localhost
REDIS_PORT=6379
LOG_LEVEL=INFO
LOG_FORMAT=json
```

Testing:
-------
```python
import os
from kvcache.core.config import reload_settings

os.environ["APP_NAME"] = "test"
settings = reload_settings()
assert settings.app.APP_NAME == "test"
```
"""

from kvcache.core.config.constants import (
    DEFAULT_TTL_UNIT,
    NAMESPACE_SEPARATOR,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    Stage,
)
from kvcache.core.config.settings import Settings, get_settings, reload_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reload_settings",
    # Enums
    "Stage",
    # Keys
    "NAMESPACE_SEPARATOR",
    # TTL
    "DEFAULT_TTL_UNIT",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
]
