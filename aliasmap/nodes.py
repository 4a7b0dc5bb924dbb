from typing import Dict, Generic, Hashable, Optional, Tuple, TypeVar

from .constants import missing_alias_message, missing_key_message, missing_value_message
from .errors import InvalidArgument

KT = TypeVar("KT", bound=Hashable)
VT = TypeVar("VT", bound=Hashable)


class KeyNode(Generic[KT, VT]):
    """
    Stored under a primary key. Holds the entry's value and its aliases.

    Aliases are kept in an insertion-ordered set (the keys of a dict) that
    is replaced by ``None`` whenever it would become empty.
    """

    __slots__ = ("_value", "_aliases")

    def __init__(self, value: VT, *aliases: KT):
        if value is None:
            raise InvalidArgument(missing_value_message)
        if any(alias is None for alias in aliases):
            raise InvalidArgument(missing_alias_message)
        self._value = value
        self._aliases: Optional[Dict[KT, None]] = dict.fromkeys(aliases) or None

    @property
    def value(self) -> VT:
        return self._value

    @property
    def aliases(self) -> Optional[Tuple[KT, ...]]:
        if self._aliases is None:
            return None
        return tuple(self._aliases)

    def has_alias(self, alias: KT) -> bool:
        return self._aliases is not None and alias in self._aliases

    def set_alias(self, alias: KT) -> Optional[Tuple[KT, ...]]:
        if alias is None:
            return None
        if self._aliases is None:
            self._aliases = {}
        self._aliases.setdefault(alias)
        return self.aliases

    def remove_alias(self, alias: KT) -> bool:
        if self._aliases is None or alias is None or alias not in self._aliases:
            return False
        del self._aliases[alias]
        if not self._aliases:
            self._aliases = None
        return True

    def __repr__(self) -> str:
        return f"KeyNode(value={self._value!r}, aliases={self.aliases!r})"


class ValueNode(Generic[KT]):
    """Stored under a value label; points back to the primary key."""

    __slots__ = ("_key",)

    def __init__(self, key: KT):
        if key is None:
            raise InvalidArgument(missing_key_message)
        self._key = key

    @property
    def key(self) -> KT:
        return self._key

    def __repr__(self) -> str:
        return f"ValueNode(key={self._key!r})"


class AliasNode(Generic[KT, VT]):
    """Stored under an alias label; points to both the primary key and the value."""

    __slots__ = ("_key", "_value")

    def __init__(self, key: KT, value: VT):
        if key is None:
            raise InvalidArgument(missing_key_message)
        if value is None:
            raise InvalidArgument(missing_value_message)
        self._key = key
        self._value = value

    @property
    def key(self) -> KT:
        return self._key

    @property
    def value(self) -> VT:
        return self._value

    def __repr__(self) -> str:
        return f"AliasNode(key={self._key!r}, value={self._value!r})"
