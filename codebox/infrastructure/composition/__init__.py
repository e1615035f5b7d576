from __future__ import annotations

# Public API of the composition root
from .container import (  # noqa: F401
    configure_logging,
    get_config,
    get_editor_service,
    get_snippet_service,
    reset_container,
)
