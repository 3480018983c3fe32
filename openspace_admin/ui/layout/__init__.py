from .build_layout import build_layout

__all__ = ["build_layout"]
