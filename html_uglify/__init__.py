"""Rewrite CSS class and id names in HTML documents to short generated names."""

__version__ = '0.1.0'

from html_uglify.uglify import HTMLUglify, process, uglify  # noqa: E402

__all__ = ['HTMLUglify', 'process', 'uglify', '__version__']
