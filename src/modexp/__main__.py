# SPDX-License-Identifier: LGPL-3-or-later
""" command-line front end for the MODEXP precompile

    modexp precompile 0x<input buffer>
    modexp pow <base> <exponent> <modulus>

all values are hex strings, the `0x` prefix is optional.  output is
printed as hex, `0x` alone for an empty result.
"""

import argparse

from modexp.consts import LENGTH_CEILING
from modexp.precompile import modexp, modexp_precompiled
from modexp.util import hexstr, parse_hex


def hex_bytes(text):
    try:
        return parse_hex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex string: {text!r}")


def run_precompile(data, length_ceiling):
    return modexp_precompiled(data, length_ceiling=length_ceiling)


def run_pow(base, exponent, modulus):
    return modexp(base, exponent, modulus)


def main(argv=None):
    main_parser = argparse.ArgumentParser("modexp",
        description="modular exponentiation over big-endian byte strings")
    main_subparsers = main_parser.add_subparsers(dest="run", required=True)

    precompile_parser = main_subparsers.add_parser("precompile",
        help="run the MODEXP precompile on a raw input buffer")
    precompile_parser.add_argument("data",
        help="input buffer: three 32-byte lengths then the operands",
        type=hex_bytes)
    precompile_parser.add_argument("--length-ceiling",
        help="length fields at or above this overflow "
             "(default: %(default)s)",
        type=int, default=LENGTH_CEILING)
    precompile_parser.set_defaults(run=run_precompile)

    pow_parser = main_subparsers.add_parser("pow",
        help="compute (base ** exponent) % modulus")
    pow_parser.add_argument("base", type=hex_bytes)
    pow_parser.add_argument("exponent", type=hex_bytes)
    pow_parser.add_argument("modulus", type=hex_bytes)
    pow_parser.set_defaults(run=run_pow)

    arguments = dict(vars(main_parser.parse_args(argv)))
    run = arguments.pop("run")

    print(hexstr(run(**arguments)))
    return 0


if __name__ == "__main__":
    main()
