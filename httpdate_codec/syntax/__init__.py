#!/usr/bin/env python

import re
import sys
from typing import List, Tuple

__all__ = [
    "rfc2616",
    "rfc5234",
]


def check_regex() -> List[Tuple[str, str, str]]:
    """Grab all the regex in this package and report any that don't compile."""
    problems = []
    for module_name in __all__:
        full_name = f"httpdate_codec.syntax.{module_name}"
        __import__(full_name)
        module = sys.modules[full_name]
        for attr_name in dir(module):
            if attr_name.startswith("_") or attr_name == "SPEC_URL":
                continue
            attr_value = getattr(module, attr_name, None)
            if isinstance(attr_value, str):
                try:
                    re.compile(attr_value, re.VERBOSE)
                except re.error as why:
                    problems.append((module_name, attr_name, str(why)))
    return problems


if __name__ == "__main__":
    for problem in check_regex():
        print("*", *problem)
