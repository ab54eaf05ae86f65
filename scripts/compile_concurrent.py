#!/usr/bin/env python3
"""
Smoke-test parallel compiles: send N compile+preview requests at once.

Each request renders a different frame of the same scene. The scene echoes
the frame it saw into the preview, so any cross-talk between concurrent
compiles or renders shows up as a mismatch.

Usage:
  python scripts/compile_concurrent.py [--url URL] [--concurrent N]
  Or set env: ANIMGEN_URL, CONCURRENT

Expected: N x OK, 0 mismatches.
"""

import argparse
import os
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed

try:
    import requests
except ImportError:
    print("Install requests: pip install requests", file=sys.stderr)
    sys.exit(1)

SCENE = """
from motion import AbsoluteFill

def Scene():
    frame = use_current_frame()
    return AbsoluteFill(name="frame-" + str(frame))
"""


def do_request(url: str, index: int) -> tuple[int, str]:
    """Compile + render frame ``index``; return (index, "OK" | reason)."""
    try:
        r = requests.post(
            url,
            json={"code": SCENE, "preview_frame": index},
            timeout=30,
        )
    except Exception as e:
        return (index, f"ERR {e}")
    if r.status_code != 200:
        return (index, f"HTTP {r.status_code}")
    body = r.json()
    if not body.get("success"):
        return (index, f"FAILED {body.get('error')}")
    seen = (body.get("preview") or {}).get("props", {}).get("name")
    if seen != f"frame-{index}":
        return (index, f"MISMATCH got {seen!r}")
    return (index, "OK")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Send N parallel compile requests and check each preview."
    )
    parser.add_argument(
        "--url",
        default=os.environ.get(
            "ANIMGEN_URL", "http://localhost:8000/api/v1/animations/compile"
        ),
        help="Compile endpoint URL",
    )
    parser.add_argument(
        "--concurrent",
        type=int,
        default=int(os.environ.get("CONCURRENT", "20")),
        help="Number of concurrent requests (default 20)",
    )
    args = parser.parse_args()

    print(f"Sending {args.concurrent} concurrent compile requests to {args.url}")
    print("---")

    results: list[tuple[int, str]] = []
    with ThreadPoolExecutor(max_workers=args.concurrent) as executor:
        futures = {
            executor.submit(do_request, args.url, i): i
            for i in range(args.concurrent)
        }
        for fut in as_completed(futures):
            idx, outcome = fut.result()
            results.append((idx, outcome))
            print(f"frame {idx}: {outcome}")

    results.sort(key=lambda x: x[0])
    print("---")
    ok = sum(1 for _, o in results if o == "OK")
    mismatch = sum(1 for _, o in results if o.startswith("MISMATCH"))
    print(f"Done. OK={ok} mismatches={mismatch} other={len(results) - ok - mismatch}")
    if ok != len(results):
        sys.exit(1)


if __name__ == "__main__":
    main()
