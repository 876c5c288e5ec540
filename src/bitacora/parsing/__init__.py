"""Parsing mixins for the Bitacora parser.

Split by grammar area:
- TokenNavigationMixin: forward-only cursor over the token list
- MetaParsingMixin: lint directive, flag, title, free text, footer
- ReleaseParsingMixin: release headings and change sections
- LinkParsingMixin: reference links and repository URL inference
"""

from bitacora.parsing.links import LinkParsingMixin
from bitacora.parsing.meta import MetaParsingMixin
from bitacora.parsing.releases import ReleaseParsingMixin
from bitacora.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "LinkParsingMixin",
    "MetaParsingMixin",
    "ReleaseParsingMixin",
    "TokenNavigationMixin",
]
