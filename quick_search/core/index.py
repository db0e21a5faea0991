"""Index data structures for substring keyword lookup.

All sets are plain dicts with ``None`` values so that iteration follows
insertion order and results stay reproducible between runs.
"""

from typing import Any, Dict, Hashable, Iterator, List, Optional

Item = Hashable


def iter_fragments(keyword: str) -> Iterator[str]:
    """Yield every contiguous substring of a keyword, the keyword included."""
    length = len(keyword)
    for start in range(length):
        for end in range(start + 1, length + 1):
            yield keyword[start:end]


class FragmentIndex:
    """Fragment index mapping keyword substrings to the keywords containing them."""

    def __init__(self) -> None:
        """Initialize the fragment index."""
        self._index: Dict[str, Dict[str, None]] = {}

    def add_keyword(self, keyword: str) -> None:
        """
        Map every fragment of a keyword back to the keyword.

        Adding a keyword that is already mapped changes nothing.

        Args:
            keyword: The keyword to map
        """
        for fragment in iter_fragments(keyword):
            keywords = self._index.get(fragment)
            if keywords is None:
                keywords = self._index[fragment] = {}
            keywords[keyword] = None

    def remove_keyword(self, keyword: str) -> None:
        """
        Unmap every fragment of a keyword.

        Fragments left without keywords are dropped.

        Args:
            keyword: The keyword to unmap
        """
        for fragment in iter_fragments(keyword):
            keywords = self._index.get(fragment)
            if keywords is None:
                continue
            keywords.pop(keyword, None)
            if not keywords:
                del self._index[fragment]

    def get_keywords(self, fragment: str) -> Optional[Dict[str, None]]:
        """
        Get keywords containing a fragment.

        The returned mapping is the live index entry and must not be modified.

        Args:
            fragment: The fragment to look up

        Returns:
            Keywords (as dict keys) or None if the fragment is unknown
        """
        return self._index.get(fragment)

    def __len__(self) -> int:
        return len(self._index)

    def clear(self) -> None:
        """Clear all fragments."""
        self._index.clear()


class ForwardIndex:
    """Forward index mapping keywords to the items carrying them."""

    def __init__(self) -> None:
        """Initialize the forward index."""
        self._index: Dict[str, Dict[Item, None]] = {}

    def add_mapping(self, keyword: str, item: Item) -> bool:
        """
        Register an item under a keyword.

        Args:
            keyword: The keyword
            item: The item carrying it

        Returns:
            True if the keyword was not known before
        """
        items = self._index.get(keyword)
        is_new = items is None
        if is_new:
            items = self._index[keyword] = {}
        items[item] = None
        return is_new

    def remove_mapping(self, keyword: str, item: Item) -> bool:
        """
        Unregister an item from a keyword.

        Raises KeyError if the keyword or item is not registered, which means
        the indexes went out of sync.

        Args:
            keyword: The keyword
            item: The item to remove

        Returns:
            True if the keyword has no items left and was dropped
        """
        items = self._index[keyword]
        del items[item]
        if not items:
            del self._index[keyword]
            return True
        return False

    def get_items(self, keyword: str) -> Optional[Dict[Item, None]]:
        """
        Get items for a keyword.

        The returned mapping is the live index entry and must not be modified.

        Args:
            keyword: The keyword to look up

        Returns:
            Items (as dict keys) or None if not found
        """
        return self._index.get(keyword)

    def __len__(self) -> int:
        return len(self._index)

    def clear(self) -> None:
        """Clear all mappings."""
        self._index.clear()


class ReverseIndex:
    """Reverse index mapping items to their keywords."""

    def __init__(self) -> None:
        """Initialize the reverse index."""
        self._index: Dict[Item, Dict[str, None]] = {}

    def add_mapping(self, item: Item, keywords: List[str]) -> None:
        """
        Merge keywords into an item's keyword set.

        Args:
            item: The item
            keywords: Keywords to add
        """
        known = self._index.get(item)
        if known is None:
            known = self._index[item] = {}
        for keyword in keywords:
            known[keyword] = None

    def pop_item(self, item: Item) -> Optional[List[str]]:
        """
        Remove an item and return its keywords.

        Args:
            item: The item to remove

        Returns:
            The item's keywords, or None if the item is unknown
        """
        keywords = self._index.pop(item, None)
        if keywords is None:
            return None
        return list(keywords)

    def get_keywords(self, item: Item) -> Optional[List[str]]:
        """
        Get keywords for an item.

        Args:
            item: The item to look up

        Returns:
            List of keywords or None if not found
        """
        keywords = self._index.get(item)
        if keywords is None:
            return None
        return list(keywords)

    def __contains__(self, item: Item) -> bool:
        return item in self._index

    def __len__(self) -> int:
        return len(self._index)

    def clear(self) -> None:
        """Clear all mappings."""
        self._index.clear()


class IndexManager:
    """Keeps the fragment, forward and reverse indexes consistent."""

    def __init__(self) -> None:
        """Initialize the index manager."""
        self.fragment_index = FragmentIndex()
        self.forward_index = ForwardIndex()
        self.reverse_index = ReverseIndex()

    def add_item(self, item: Item, keywords: List[str]) -> bool:
        """
        Add an item under prepared keywords.

        Re-adding a known item merges the new keywords into its existing set.

        Args:
            item: The item to add
            keywords: Normalized, duplicate-free keywords

        Returns:
            True if added, False if there were no keywords
        """
        if not keywords:
            return False

        for keyword in keywords:
            if self.forward_index.add_mapping(keyword, item):
                self.fragment_index.add_keyword(keyword)

        self.reverse_index.add_mapping(item, keywords)
        return True

    def remove_item(self, item: Item) -> bool:
        """
        Remove an item and every link it created.

        Keyword fragments are only unmapped once no item carries the keyword.

        Args:
            item: The item to remove

        Returns:
            True if removed, False if not found
        """
        keywords = self.reverse_index.pop_item(item)
        if keywords is None:
            return False

        for keyword in keywords:
            if self.forward_index.remove_mapping(keyword, item):
                self.fragment_index.remove_keyword(keyword)

        return True

    def lookup_fragment(self, fragment: str) -> Optional[Dict[str, None]]:
        """Get keywords containing a fragment, or None."""
        return self.fragment_index.get_keywords(fragment)

    def items_for_keyword(self, keyword: str) -> Dict[Item, None]:
        """
        Get items carrying a keyword.

        Raises KeyError for a keyword the fragment index knows but the
        forward index does not.
        """
        items = self.forward_index.get_items(keyword)
        if items is None:
            raise KeyError(f"Keyword {keyword!r} has no items but is still indexed")
        return items

    def keywords_for_item(self, item: Item) -> Optional[List[str]]:
        """Get an item's keywords, or None."""
        return self.reverse_index.get_keywords(item)

    def clear(self) -> None:
        """Clear all indexes."""
        self.fragment_index.clear()
        self.forward_index.clear()
        self.reverse_index.clear()

    def get_stats(self) -> Dict[str, Any]:
        """Get index sizes."""
        return {
            "items": len(self.reverse_index),
            "keywords": len(self.forward_index),
            "fragments": len(self.fragment_index)
        }
