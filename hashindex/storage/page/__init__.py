from .page import Page
from .page_store import PageStore

__all__ = ["Page", "PageStore"]
