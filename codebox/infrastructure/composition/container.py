from __future__ import annotations

import threading
from typing import Optional

from codebox.config import EditorConfig, load_config

_config_singleton = None  # type: Optional[EditorConfig]
_editor_service_singleton = None  # type: Optional["EditorService"]
_snippet_service_singleton = None  # type: Optional["SnippetService"]
_singleton_lock = threading.Lock()


def get_config() -> EditorConfig:
    global _config_singleton
    if _config_singleton is None:
        with _singleton_lock:
            if _config_singleton is None:
                _config_singleton = load_config()
    return _config_singleton


def configure_logging(config: Optional[EditorConfig] = None) -> None:
    from codebox.observability import setup_structlog_logging, emit_event

    cfg = config or get_config()
    setup_structlog_logging(cfg.LOG_LEVEL, fmt=cfg.LOG_FORMAT)
    emit_event(
        "codebox_logging_configured",
        default_language=cfg.DEFAULT_LANGUAGE,
        default_theme=cfg.DEFAULT_THEME,
    )


def get_editor_service():
    """Composition Root: build and return a singleton EditorService."""
    global _editor_service_singleton
    if _editor_service_singleton is not None:
        return _editor_service_singleton

    cfg = get_config()
    with _singleton_lock:
        if _editor_service_singleton is not None:
            return _editor_service_singleton

        from codebox.application.services.editor_service import EditorService

        _editor_service_singleton = EditorService(
            default_language=cfg.DEFAULT_LANGUAGE,
            default_theme=cfg.DEFAULT_THEME,
        )
        return _editor_service_singleton


def get_snippet_service():
    """
    Composition Root: build and return a singleton SnippetService.
    Keeps construction inside infrastructure, so callers only depend on the application layer.
    """
    global _snippet_service_singleton
    if _snippet_service_singleton is not None:
        return _snippet_service_singleton

    cfg = get_config()
    # Ensure singleton creation is thread-safe under concurrent first requests
    with _singleton_lock:
        if _snippet_service_singleton is not None:
            return _snippet_service_singleton

        from codebox.application.services.snippet_service import SnippetService
        from codebox.domain.services.code_normalizer import CodeNormalizer
        from codebox.domain.services.language_detector import LanguageDetector
        from codebox.infrastructure.storage.json_snippet_repository import JsonSnippetRepository

        _snippet_service_singleton = SnippetService(
            snippet_repository=JsonSnippetRepository(cfg.STORAGE_PATH),
            code_normalizer=CodeNormalizer(),
            language_detector=LanguageDetector(),
            default_theme=cfg.DEFAULT_THEME,
            recent_limit=cfg.RECENT_LIMIT,
        )
        return _snippet_service_singleton


def reset_container() -> None:
    """Drop cached singletons (used by tests and after config changes)."""
    global _config_singleton, _editor_service_singleton, _snippet_service_singleton
    with _singleton_lock:
        _config_singleton = None
        _editor_service_singleton = None
        _snippet_service_singleton = None
