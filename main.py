# main.py
from __future__ import annotations

import argparse
import json
import os

from alg.astar_search import AStarParams, run_astar_search
from alg.exhaustive_search import ExhaustiveSearchParams, exhaustive_mlcs
from alg.verify import verify_common_subsequence
from examples.instances import INSTANCES, build_instance


def _pretty_print_result(result) -> None:
    print("=== Result ===")
    print("status       :", result.status)
    print("sequence     :", repr(result.sequence))
    print("length       :", result.length)
    print("rounds       :", result.rounds)
    print("expanded     :", result.expanded)
    print("generated    :", result.generated)
    print("max_frontier :", result.max_frontier)
    print(f"runtime_sec  : {result.runtime_sec:.6f}")
    print("alphabet     :", "".join(result.meta.get("alphabet", [])))


def _dump_result_json(path: str, result, extra: dict) -> None:
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    data = result.to_dict()
    data.update(extra)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    print(f"[dump] saved result to {path}")


def main():
    parser = argparse.ArgumentParser("Multiple longest common subsequence (windowed A*)")
    parser.add_argument("strings", nargs="*", help="input strings (ignored when --instance is given)")
    parser.add_argument("--instance", type=str, default="", choices=[""] + sorted(INSTANCES.keys()))

    # Search knobs
    parser.add_argument("--window", type=int, default=20, help="relaxation window C")
    parser.add_argument("--max_rounds", type=int, default=-1, help="-1 means unbounded")
    parser.add_argument("--time_limit", type=float, default=-1.0, help="seconds; -1 means unbounded")
    parser.add_argument("--progress_every", type=int, default=0)
    parser.add_argument("--strict", action="store_true", help="fail when no strings are given")

    # Baseline / output
    parser.add_argument("--exact", action="store_true", help="also run the exhaustive baseline")
    parser.add_argument("--exact_max_nodes", type=int, default=-1)
    parser.add_argument("--dump_json", type=str, default="")
    args = parser.parse_args()

    expected = None
    if args.instance:
        inst = build_instance(args.instance)
        strings = inst["strings"]
        expected = inst.get("expected", None)
        print(f"[instance] {args.instance}  d={len(strings)}")
    else:
        strings = list(args.strings)

    params = AStarParams(
        window=int(args.window),
        max_rounds=None if args.max_rounds < 0 else int(args.max_rounds),
        time_limit_sec=None if args.time_limit < 0 else float(args.time_limit),
        strict=bool(args.strict),
        progress_every=int(args.progress_every),
    )

    result = run_astar_search(strings, params)
    _pretty_print_result(result)

    check = verify_common_subsequence(result.sequence, strings, verbose=True)
    extra = {"verify_ok": check["ok"]}

    if expected is not None:
        print("reference    :", repr(expected), f"(len={len(expected)}, found len={result.length})")
        extra["expected"] = expected

    if args.exact:
        ep = ExhaustiveSearchParams(max_nodes=None if args.exact_max_nodes < 0 else int(args.exact_max_nodes))
        ex = exhaustive_mlcs(strings, ep)
        gap = int(ex["best_length"]) - int(result.length)
        print("=== Exhaustive baseline ===")
        print("best_sequence:", repr(ex["best_sequence"]))
        print("best_length  :", ex["best_length"], " complete:", ex["complete"])
        print("visited_nodes:", ex["visited_nodes"], " pruned_nodes:", ex["pruned_nodes"])
        print(f"runtime_sec  : {ex['runtime_sec']:.6f}")
        print("gap          :", gap)
        extra.update({"exact_length": ex["best_length"], "exact_complete": ex["complete"], "gap": gap})

    if args.dump_json:
        _dump_result_json(args.dump_json, result, extra)


if __name__ == "__main__":
    main()
