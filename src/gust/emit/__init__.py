from gust.emit.escape import escape_class
from gust.emit.purger import Match, Purger, realize
from gust.emit.serializer import serialize

__all__ = ["Match", "Purger", "escape_class", "realize", "serialize"]
