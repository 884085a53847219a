# examples/instances.py
from __future__ import annotations
from typing import Any, Callable, Dict, List


# ----------------------------
# Instance library
# ----------------------------
# Each builder returns {"strings": [...], "expected": str | None}.
# "expected" is a reference common subsequence recorded with the instance.
# It is a lower bound only: the search may return another string of the
# same length or a longer one (e.g. 49 symbols on "long" against 48 here).

def _simple_case() -> Dict[str, Any]:
    return {"strings": ["ABC", "AC", "BAC"], "expected": "AC"}


def _all_same() -> Dict[str, Any]:
    return {"strings": ["abcdef"] * 4, "expected": "abcdef"}


def _no_match() -> Dict[str, Any]:
    return {"strings": ["ABC", "DEF"], "expected": ""}


def _empty_strings() -> Dict[str, Any]:
    return {"strings": ["", "ABC"], "expected": ""}


def _all_empty_strings() -> Dict[str, Any]:
    return {"strings": ["", ""], "expected": ""}


def _medium_case() -> Dict[str, Any]:
    return {
        "strings": [
            "gxt#xayb",
            "abgt#ab",
            "gyayt#ahjb",
            "gyayjjjt#ab",
            "gyayt#ahhhhb",
            "ygaytp#pppahjb",
            "ylllgaytm#8765majb",
        ],
        "expected": "gt#ab",
    }


def _long() -> Dict[str, Any]:
    return {
        "strings": [
            "qwertyuiop$asd$fgh$jkl;zxcvbnmqwert|yuiop1234567890-0",
            "qwertyuiopasdfghj$kl;zx$cvbnmqwe$rtyu|iop,1234567890-0",
        ],
        "expected": "qwertyuiopasdfghjkl;zxcvbnmqwert|iop1234567890-0",
    }


def _unicode() -> Dict[str, Any]:
    return {
        "strings": [
            "串用于测试展示测中测中测测🚀测测串文",
            "串串用于测试测中中展示测测中🚀文串",
            "串用于测试展中中中中中示中测🚀测测文",
            "串用于测串试展示中测测文",
            "串用于测中中中试串展中示🚀测测测中文",
            "串用于测试中中中展串🚀中示中文",
            "串中中中用于测🚀试展示测测测中中串文",
            "串用串中🚀中于测试中展中示中文串",
            "串🚀用于测中中试中展示中文测测测测测串",
        ],
        "expected": "串用于测试展示中文",
    }


def _mix() -> Dict[str, Any]:
    return {
        "strings": [
            "=串-用2于测试2展示测中测中0ss测测🚀测测串文|",
            "=串-串用2于测2试测中ss中0展示测测中🚀文|串",
            "=串-用2于测试2展中中0xs中中中示中测🚀测|测文",
            "=串-|用2于ss串试0展xx🚀示中测测|ss文",
            "=串-用2于-测22中中中试串展s中示🚀测测s|测中文",
            "=串用2于测s-试2中中0中展串🚀中示s中|文",
            "=2串2中2中2中s用-于0测🚀试展示测s测测中中串文|",
            "=串用2串2中🚀2-中于0测试中展中示s中文|串",
            "=串2🚀用1于-2测2中20中试s中展s示中文测|测测测测串",
        ],
        "expected": "=串用于试展示中文",
    }


def _medium_plus() -> Dict[str, Any]:
    return {
        "strings": [
            "=串-用2于测试2展示测中测中0shgksjklkjlj测测🚀测测串文|",
            "=串-串用2于测2试测中ss中0展示测测l中🚀文|串",
            "=串-用2于测试2展67中中0xs中中中kkljhkkh示中测🚀测|测文|",
            "=串-|用2于ss串试056u展xx🚀示中lj测ggk测|ss文|",
            "=串-用2于-测22中中中uyty试串lj展gkks中示🚀测测s|测中文|b",
            "=串-用2于测s-试2中中0中hgtihlkk展串🚀中示s中|文|",
            "=2串2中2中2中s用-于0t测🚀j试展示测s测hkkkg测中中串文|l",
            "=2串2中2中2中s用-于0测🚀试展示测s中k中l串文|",
            "=2串2中2中2中s用ur-于0测🚀试展示测jkjljkkllkskg中串文|;",
            "=2串2中2中2中s用u-ur于0测🚀试展jll示测gks中中串文|0",
            "=2串2中2中2中s用-uurr于0测🚀试kl展示测s测中中串文|8",
            "=2中2中s用-于0测🚀试展示测jsjhg测测中串文|",
            "=2串2中2中2中s用-于0rttru测ljjgjh🚀试示测s测测中中串文|",
            "=2串2中2中2中s用-于0gjg测lu🚀试展示测s测测中中串文|6",
            "=2中22s-于0测🚀展测j测ljy中中串文|",
            "=2串2中2中2中s用-jklkjll于hgj0测🚀试展示测s测中中串文|",
            "=2串2中2中2中s用-于0g🚀试展示测s测中中lj串文|",
            "=2串2中2中2中s用-于hj0试展示测sghhjjhgjl测测中串文|",
            "=2串2中2中2中s用-于0h🚀试展示测sj测中jkl中串文|",
            "=2串2中2中2中s用-于0j🚀试展示测gjgjsjk测串文|",
            "=2串2中2中2中s用-于kj0🚀试展示测jjjlks中串文|",
            "=2串2中2中2中s用-于0l🚀试展示fdj测l测中中串文|",
            "=2串2中2中2中s用-于0🚀kl试展测测djkhdd中文|",
            "=2串2中2中2中s用-于0试展示测s测fdljh中中串文|",
            "=2串2中2中2中s用-于0测l🚀l试展示lshd测测中中串文|",
            "=2串2中2中2中s用-于0测🚀jk试展示sf测测中中串文|",
            "=串用2串2中🚀2-中于0测试中lk展中ks中23文|串",
        ],
        "expected": "=2于测文|",
    }


INSTANCES: Dict[str, Callable[[], Dict[str, Any]]] = {
    "simple_case": _simple_case,
    "all_same": _all_same,
    "no_match": _no_match,
    "empty_strings": _empty_strings,
    "all_empty_strings": _all_empty_strings,
    "medium_case": _medium_case,
    "long": _long,
    "unicode": _unicode,
    "mix": _mix,
    "medium_plus": _medium_plus,
}


def build_instance(name: str) -> Dict[str, Any]:
    if name not in INSTANCES:
        raise ValueError(f"Unknown instance: {name} (choices: {sorted(INSTANCES.keys())})")
    inst = INSTANCES[name]()
    inst["name"] = name
    return inst


def instance_strings(name: str) -> List[str]:
    return list(build_instance(name)["strings"])
