# SPDX-License-Identifier: LGPL-3-or-later
""" accumulate precompile test cases from `case_*` methods
"""

import inspect


class TestAccumulatorBase:
    __test__ = False

    def __init__(self):
        self.test_data = []
        # automatically identifies anything starting with "case_" and
        # runs it.  very similar to unittest auto-identification except
        # we need a different system
        for n, v in self.__class__.__dict__.items():
            if n.startswith("case_") and callable(v):
                v(self)

    def add_case(self, data, expected, length_ceiling=None, src_loc_at=0):
        # name of the case_* method that (indirectly) called this function
        test_name = inspect.stack()[1 + src_loc_at][3]
        tc = TestCase(data, test_name, expected,
                      length_ceiling=length_ceiling)
        self.test_data.append(tc)


class TestCase:
    __test__ = False

    def __init__(self, data, name, expected, length_ceiling=None):
        self.data = bytes(data)
        self.name = name
        self.expected = bytes(expected)
        self.length_ceiling = length_ceiling

    def __repr__(self):
        return (f"TestCase({self.name!r}, data_len={len(self.data)}, "
                f"expected_len={len(self.expected)})")
