"""Application pagination – page state and page-button link building."""
from mp_gridview.application.pagination.page_state import PageState
from mp_gridview.application.pagination.link_builder import ButtonKind, PageButton, PaginationLinkBuilder

__all__ = ["ButtonKind", "PageButton", "PageState", "PaginationLinkBuilder"]
