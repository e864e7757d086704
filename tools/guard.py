from __future__ import annotations

import logging
import sys

from tools.standards import scan

DEFAULT_ROOTS = ["guard_clauses", "guard_http", "tools", "tests"]

log = logging.getLogger("tools.guard")


def run(roots: list[str]) -> int:
    errors = scan(roots)
    for error in errors:
        log.error("%s", error)
    if errors:
        log.error("%d standards violation(s)", len(errors))
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    roots = list(sys.argv[1:] if argv is None else argv)
    return run(roots or DEFAULT_ROOTS)


if __name__ == "__main__":
    raise SystemExit(main())
