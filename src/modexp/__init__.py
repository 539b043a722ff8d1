# SPDX-License-Identifier: LGPL-3-or-later
""" modular exponentiation (`pow(x, y, z)`) over big-endian byte strings,
following the byte-level contract of the EVM MODEXP precompile.
"""

from modexp.natural import Natural, Ordering
from modexp.bytecodec import from_big_endian, to_big_endian
from modexp.reducer import ModularReducer, reduce
from modexp.powmod import modpow
from modexp.precompile import modexp, modexp_precompiled

__all__ = ["Natural", "Ordering", "from_big_endian", "to_big_endian",
           "ModularReducer", "reduce", "modpow", "modexp",
           "modexp_precompiled"]
