"""Line classifiers for the Bitacora lexer.

Each classifier is a mixin that decides whether one source line matches a
particular block form. Classifiers are tried in a fixed priority order by
the Lexer.
"""

from bitacora.lexer.classifiers.comment import (
    CommentClassifierMixin,
)
from bitacora.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from bitacora.lexer.classifiers.link_ref import (
    LinkRefClassifierMixin,
)
from bitacora.lexer.classifiers.list import (
    ListClassifierMixin,
)
from bitacora.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "CommentClassifierMixin",
    "HeadingClassifierMixin",
    "LinkRefClassifierMixin",
    "ListClassifierMixin",
    "ThematicClassifierMixin",
]
