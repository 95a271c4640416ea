"""Select sense nodes and drop nested phrase fragments"""

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..logging_config import get_logger
from ..models.markup_schema import FragmentMarker

logger = get_logger(__name__)


class SenseSelector:
    """Collects sense nodes in document order, skipping fragment noise"""

    def __init__(self, sense_class: str, fragment_marker: FragmentMarker):
        self.sense_class = sense_class
        self.fragment_marker = fragment_marker

    def candidates(self, tree: BeautifulSoup | Tag) -> list[Tag]:
        """All nodes carrying the sense class, in document order"""
        return list(tree.find_all(class_=self.sense_class))

    def is_fragment(self, node: Tag) -> bool:
        """Check if any descendant carries the fragment marker"""
        return node.find(self.fragment_marker.matches) is not None

    def select(self, tree: BeautifulSoup | Tag) -> list[Tag]:
        """Sense nodes that are real senses rather than phrase fragments"""
        candidates = self.candidates(tree)
        senses = [node for node in candidates if not self.is_fragment(node)]
        if len(senses) != len(candidates):
            logger.debug(
                f"Skipped {len(candidates) - len(senses)} of {len(candidates)} "
                f"sense nodes marked by {self.fragment_marker.attribute}="
                f"'{self.fragment_marker.value}'"
            )
        return senses
