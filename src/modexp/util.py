# SPDX-License-Identifier: LGPL-3-or-later
from enum import Enum
from fnmatch import fnmatchcase
import os
import sys
from functools import lru_cache


class LogType(Enum):
    Default = "default"
    Precompile = "precompile"
    PowMod = "powmod"


@lru_cache(typed=True)
def __parse_log_env_var(silencelog_raw):
    if silencelog_raw is None:
        return {k: False for k in LogType}
    silencelog = os.environ.decodevalue(silencelog_raw)
    silencelog = silencelog.lower().split(",")
    for i, v in enumerate(silencelog):
        silencelog[i] = v.strip()
    retval = {k: True for k in LogType}
    if len(silencelog) > 1 and silencelog[-1] == "":
        # allow trailing comma
        silencelog.pop()
    if len(silencelog) == 1:
        if silencelog[0] in ("0", "false"):
            for k in LogType:
                retval[k] = False
            silencelog.pop()
        elif silencelog[0] in ("1", "true", ""):
            silencelog.pop()
    for v in silencelog:
        silenced = True
        if v.startswith("!"):
            v = v[1:]
            silenced = False
        matches = False
        for k in LogType:
            if fnmatchcase(k.value, v):
                matches = True
                retval[k] = silenced
        assert matches, (f"SILENCELOG: {v!r} did not match any known LogType: "
                         f"LogTypes: {' '.join(i.value for i in LogType)}")
    return retval


__ENCODED_SILENCELOG = os.environ.encodekey("SILENCELOG")


def log(*args, kind=LogType.Default, **kwargs):
    """verbose printing to stderr, can be disabled by setting env var
    "SILENCELOG".  stdout is left to the CLI result.
    """
    # look up in os.environ._data since it is a dict and hence won't raise
    # internal exceptions to avoid triggering breakpoints on raised exceptions.
    env_var = os.environ._data.get(__ENCODED_SILENCELOG, None)
    silenced = __parse_log_env_var(env_var)
    if silenced[kind]:
        return
    kwargs.setdefault("file", sys.stderr)
    print(*args, **kwargs)


def hexstr(data):
    """ render a byte string the way the CLI and the logs show it:
    `0x` followed by lowercase hex digits (just `0x` when empty)
    """
    return "0x" + bytes(data).hex()


def parse_hex(text):
    """ inverse of `hexstr`, the `0x` prefix and surrounding whitespace
    are optional.  raises ValueError on odd length or non-hex digits.
    """
    text = text.strip()
    if text[:2] in ("0x", "0X"):
        text = text[2:]
    return bytes.fromhex(text)
