import logging

from .aliasmap import AliasMap
from .constants import logger_name
from .errors import AliasMapError, ConflictError, InvalidArgument
from .nodes import AliasNode, KeyNode, ValueNode

logging.getLogger(logger_name).addHandler(logging.NullHandler())

__all__ = [
    "AliasMap",
    "AliasMapError",
    "AliasNode",
    "ConflictError",
    "InvalidArgument",
    "KeyNode",
    "ValueNode",
]
