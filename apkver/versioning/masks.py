# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Ordering-mask bits and their relational operator strings.

Comparison results and dependency operators share one bit mask:

    VERSION_EQUAL    1   =
    VERSION_LESS     2   <
    VERSION_GREATER  4   >
    VERSION_FUZZY    8   ~

Combinations such as LESS|EQUAL ("<=") describe operators; a comparison
itself only ever returns a single bit, or all three ordering bits when one
side is absent.
"""

from __future__ import annotations

__all__ = [
    "VERSION_UNKNOWN",
    "VERSION_EQUAL",
    "VERSION_LESS",
    "VERSION_GREATER",
    "VERSION_FUZZY",
    "DEPMASK_ANY",
    "DEPMASK_CHECKSUM",
    "op_string",
    "op_mask",
]

VERSION_UNKNOWN = 0
VERSION_EQUAL = 1
VERSION_LESS = 2
VERSION_GREATER = 4
VERSION_FUZZY = 8
DEPMASK_ANY = VERSION_EQUAL | VERSION_LESS | VERSION_GREATER | VERSION_FUZZY
DEPMASK_CHECKSUM = VERSION_LESS | VERSION_GREATER

_OP_STRINGS: dict[int, str] = {
    VERSION_LESS: "<",
    VERSION_LESS | VERSION_EQUAL: "<=",
    VERSION_EQUAL | VERSION_FUZZY: "~",
    VERSION_FUZZY: "~",
    VERSION_EQUAL: "=",
    VERSION_GREATER | VERSION_EQUAL: ">=",
    VERSION_GREATER: ">",
    DEPMASK_CHECKSUM: "><",
}

# "~" maps back to the fuzzy-equal combination
_OP_MASKS: dict[str, int] = {
    "<": VERSION_LESS,
    "<=": VERSION_LESS | VERSION_EQUAL,
    "~": VERSION_EQUAL | VERSION_FUZZY,
    "=": VERSION_EQUAL,
    ">=": VERSION_GREATER | VERSION_EQUAL,
    ">": VERSION_GREATER,
    "><": DEPMASK_CHECKSUM,
}


def op_string(mask: int) -> str:
    """Return the operator string for a mask, or "?" if it has none.

    Example:
        ```python
        op_string(VERSION_LESS | VERSION_EQUAL)  # "<="
        op_string(DEPMASK_ANY)  # "?"
        ```
    """
    return _OP_STRINGS.get(mask, "?")


def op_mask(op: str) -> int:
    """Return the mask for an operator string, or VERSION_UNKNOWN."""
    return _OP_MASKS.get(op.strip(), VERSION_UNKNOWN)
