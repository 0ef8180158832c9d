from __future__ import annotations

# RFC 6902 operation names.
OP_ADD = "add"
OP_REMOVE = "remove"
OP_REPLACE = "replace"
OP_MOVE = "move"
OP_COPY = "copy"
OP_TEST = "test"

OPERATION_NAMES = {OP_ADD, OP_REMOVE, OP_REPLACE, OP_MOVE, OP_COPY, OP_TEST}

SIDE_LEFT = "left"
SIDE_RIGHT = "right"

ROOT_POINTER = ""
POINTER_SEPARATOR = "/"

# Option names accepted by mapping-form configuration.
OPTION_OBJECT_HASH = "object_hash"
OPTION_PROPERTY_FILTER = "property_filter"
OPTION_IGNORE_MOVE = "ignore_move"
OPTION_MAX_DEPTH = "max_depth"
OPTION_ARRAY = "array"

CONFIG_OPTIONS = {
    OPTION_OBJECT_HASH,
    OPTION_PROPERTY_FILTER,
    OPTION_IGNORE_MOVE,
    OPTION_MAX_DEPTH,
    OPTION_ARRAY,
}
