# SPDX-License-Identifier: LGPL-3-or-later
""" constants shared by the arithmetic and the precompile input layout
"""

# width of one Natural digit
WORD_SIZE = 64
WORD_BYTES = WORD_SIZE // 8
WORD_MASK = (1 << WORD_SIZE) - 1

# input layout: three 32-byte big-endian length fields, then the operands
LENGTH_FIELD_WIDTH = 32
LENGTH_FIELD_COUNT = 3
HEADER_SIZE = LENGTH_FIELD_WIDTH * LENGTH_FIELD_COUNT
# a length field only decodes if these leading bytes are all zero...
OVERFLOW_PREFIX_WIDTH = LENGTH_FIELD_WIDTH - 8
# ...and the trailing 8-byte integer is strictly below this
LENGTH_CEILING = (1 << 32) - 1
