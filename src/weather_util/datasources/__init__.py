"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, query models
    └── fetch.py          # Fetch functions (one per endpoint)

Fetch functions return raw dicts; ``get_*`` wrappers hand them to
``weather_util.parsing`` so callers receive validated models.
"""
