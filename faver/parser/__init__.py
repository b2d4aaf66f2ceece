"""faver.parser: разбор HTML и поиск ссылок на иконки."""

from .icon_links import extract_icon_hrefs, parse_document, resolve_root_relative

__all__ = ["extract_icon_hrefs", "parse_document", "resolve_root_relative"]
