import logging
from typing import (
    Dict,
    Generic,
    Hashable,
    Iterator,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from .constants import (
    foreign_alias_message,
    foreign_key_message,
    foreign_value_message,
    same_label_message,
)
from .errors import ConflictError
from .nodes import AliasNode, KeyNode, ValueNode

KT = TypeVar("KT", bound=Hashable)
VT = TypeVar("VT", bound=Hashable)
Node = Union[KeyNode, ValueNode, AliasNode]

logger = logging.getLogger(__name__)


class AliasMap(Generic[KT, VT], MutableMapping[KT, VT]):
    """
    A dictionary where a primary key, its value and any of its aliases all
    resolve to the same entry in O(1).

    Every label lives in one internal dict: the primary key maps to a
    ``KeyNode``, the value to a ``ValueNode`` and each alias to an
    ``AliasNode``. A label can belong to one entry only.

    As a ``MutableMapping`` it behaves like a dict of primary keys to values:
    ``len()`` counts entries and iteration yields primary keys.
    """

    def __init__(self, existing: Union[Mapping[KT, VT], None] = None):
        self._labels: Dict[Hashable, Node] = {}
        self._entries_count = 0
        if existing:
            self.update(existing)

    @property
    def entries_count(self) -> int:
        """Number of entries, one per primary key."""
        return self._entries_count

    @property
    def label_count(self) -> int:
        """Number of labels: keys, values and aliases together."""
        return len(self._labels)

    def get(self, label, default=None):
        """
        Gets the value for a key or alias.
        If a value is given, returns the primary key for that value.
        """
        node = self._labels.get(label)
        if node is None:
            return default
        if isinstance(node, ValueNode):
            return node.key
        return node.value

    def get_key(self, label, default=None):
        """Gets the primary key for a key, alias or value."""
        node = self._labels.get(label)
        if node is None:
            return default
        if isinstance(node, KeyNode):
            return label
        return node.key

    def get_aliases(self, label) -> Optional[Tuple[KT, ...]]:
        """
        Returns the aliases of the entry that ``label`` belongs to.

        ``None`` means the label is unknown, an empty tuple means the entry
        has no aliases.
        """
        key = self.get_key(label)
        if key is None:
            return None
        return self._labels[key].aliases or ()

    def has(self, label) -> bool:
        return label in self._labels

    def has_alias(self, key: KT, alias) -> bool:
        """Whether ``alias`` is an alias of the primary key ``key``. ``key`` is not resolved."""
        node = self._labels.get(alias)
        return isinstance(node, AliasNode) and node.key == key

    def set(self, key: KT, value: VT, *aliases):
        """
        Adds an entry. If ``key`` already exists, the entry is replaced and
        its aliases are merged with the new ones.

        An alias equal to ``value`` is dropped, so a former alias can be
        promoted to the value of its own key.
        """
        if key is None or value is None:
            return None

        aliases = tuple(dict.fromkeys(alias for alias in aliases if alias is not None))
        self._check_entry(key, value, aliases)

        node = self._labels.get(key)
        if node is not None:
            aliases = (node.aliases or ()) + aliases
            self.delete(key)

        aliases = tuple(alias for alias in dict.fromkeys(aliases) if alias != value)
        self._labels[key] = KeyNode(value, *aliases)
        self._labels[value] = ValueNode(key)
        for alias in aliases:
            self._labels[alias] = AliasNode(key, value)

        self._entries_count += 1
        logger.debug("Set %r -> %r with aliases %r", key, value, aliases)
        return self

    def _check_entry(self, key, value, aliases: Tuple) -> None:
        node = self._labels.get(key)
        if node is not None and not isinstance(node, KeyNode):
            raise self._conflict(foreign_key_message.format(key=key, owner=node.key))
        if value == key:
            raise self._conflict(
                same_label_message.format(label=value, first="key", second="value", key=key)
            )
        owner = self.get_key(value)
        if owner is not None and owner != key:
            raise self._conflict(foreign_value_message.format(value=value, owner=owner))
        for alias in aliases:
            if alias == key:
                raise self._conflict(
                    same_label_message.format(label=alias, first="key", second="alias", key=key)
                )
            owner = self.get_key(alias)
            if owner is not None and owner != key:
                raise self._conflict(foreign_alias_message.format(alias=alias, owner=owner))

    @staticmethod
    def _conflict(message: str) -> ConflictError:
        logger.debug("Rejected write: %s", message)
        return ConflictError(message)

    def set_alias(self, label, *aliases):
        """Adds aliases to the primary key of a key, alias or value."""
        if label is None or not aliases:
            return None
        key = self.get_key(label)
        if key is None:
            return None

        node: KeyNode = self._labels[key]
        new_aliases = {}
        for alias in aliases:
            if alias is None or alias in new_aliases or self.has_alias(key, alias):
                continue
            owner = self.get_key(alias)
            if owner is not None:
                if owner == key:
                    role = "key" if alias == key else "value"
                    raise self._conflict(
                        same_label_message.format(label=alias, first=role, second="alias", key=key)
                    )
                raise self._conflict(foreign_alias_message.format(alias=alias, owner=owner))
            new_aliases[alias] = None

        for alias in new_aliases:
            node.set_alias(alias)
            self._labels[alias] = AliasNode(key, node.value)
        if new_aliases:
            logger.debug("Added aliases %r to %r", tuple(new_aliases), key)
        return self

    def delete(self, label) -> bool:
        """Deletes the whole entry (key, value and all aliases) that ``label`` belongs to."""
        key = self.get_key(label)
        if key is None:
            return False

        node: KeyNode = self._labels.pop(key)
        for alias in node.aliases or ():
            del self._labels[alias]
        del self._labels[node.value]

        self._entries_count -= 1
        logger.debug("Deleted %r", key)
        return True

    def delete_alias(self, label, alias) -> bool:
        key = self.get_key(label)
        if key is None or not self.has_alias(key, alias):
            return False

        self._labels[key].remove_alias(alias)
        del self._labels[alias]
        logger.debug("Deleted alias %r of %r", alias, key)
        return True

    def clear(self) -> None:
        self._labels.clear()
        self._entries_count = 0

    def __contains__(self, label) -> bool:
        return self.has(label)

    def __getitem__(self, label):
        if label not in self._labels:
            raise KeyError(label)
        return self.get(label)

    def __setitem__(self, k: KT, v: VT):
        self.set(k, v)

    def __delitem__(self, label):
        if not self.delete(label):
            raise KeyError(label)

    def __len__(self) -> int:
        return self._entries_count

    def __iter__(self) -> Iterator[KT]:
        return (label for label, node in self._labels.items() if isinstance(node, KeyNode))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"
