"""Command-line entry point: evaluate the functions or run the checks."""

import json
import logging
import sys
import argparse
from dataclasses import asdict
from pathlib import Path

from zetaquad.check import CheckResult
from zetaquad.checks import CHECKS, get_checks_by_category
from zetaquad.dual import Dual
from zetaquad.errors import DomainError
from zetaquad.functions import log_integral_transform, zeta


def _print_result(result: CheckResult, idx, total, verbose=True):
    status = "OK" if result.passed else "FAIL"
    line = f"[{idx}/{total}] {result.check_id}: [{status}] {result.n_passed}/{len(result.cases)} cases"
    if result.n_warnings:
        line += f", {result.n_warnings} convergence warnings"
    print(line + f", max |error| {result.max_abs_error:.2e}")
    if not verbose:
        return
    for c in result.cases:
        if not c.passed:
            print(f"    inputs={c.inputs}, expected={c.expected}, got={c.computed}, err={c.error}")
        for w in c.warnings:
            print(f"    inputs={c.inputs}: {w}")


def run_checks(
    categories: list[str] | None = None,
    check_ids: list[str] | None = None,
    output_file: str | None = None,
    verbose: bool = True,
) -> dict:
    """Grade every selected check against its reference."""
    if check_ids:
        checks = [CHECKS[cid] for cid in check_ids if cid in CHECKS]
    elif categories:
        checks = [c for cat in categories for c in get_checks_by_category(cat)]
    else:
        checks = list(CHECKS.values())

    if not checks:
        print("No checks matched the filters.")
        return {}

    n = len(checks)
    print(f"Running {n} checks")
    print("=" * 60)

    results = []
    for i, check in enumerate(checks):
        result = check.grade()
        results.append(result)
        _print_result(result, i + 1, n, verbose=verbose)

    failures = [r.check_id for r in results if not r.passed]
    print(f"\n{n - len(failures)}/{n} checks passed all cases.")
    if failures:
        print(f"Failures: {failures}")

    output = {
        "n_checks": n,
        "n_passed": n - len(failures),
        "failures": failures,
        "results": [dict(asdict(r), passed=r.passed, max_abs_error=r.max_abs_error) for r in results],
    }

    if output_file:
        Path(output_file).write_text(json.dumps(output, indent=2, default=str))
        print(f"\nResults saved to {output_file}")

    return output


def main(argv=None):
    parser = argparse.ArgumentParser(description="zetaquad: special functions with quadrature-based derivatives")
    parser.add_argument("--zeta", type=float, metavar="S", help="Evaluate zeta(S)")
    parser.add_argument("--seed", type=float, default=None,
                        help="Derivative seed for --zeta (enables dzeta/ds)")
    parser.add_argument("--logintegral", type=float, nargs=4, metavar=("ALPHA", "Z", "W", "M"),
                        help="Evaluate log of the integral of x^-alpha z^(x-1) w^((x-1)^2) on [M, inf)")
    parser.add_argument("--check", action="store_true", help="Run the numerical checks")
    parser.add_argument("--category", nargs="*", help="Filter checks by category")
    parser.add_argument("--checks", nargs="*", help="Specific check IDs to run")
    parser.add_argument("--output", "-o", default=None, help="Output JSON file for --check")
    parser.add_argument("--list", action="store_true", help="List all checks")
    parser.add_argument("--quiet", action="store_true", help="Less verbose output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging, quadrature diagnostics")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    stream = sys.stderr if args.verbose else None

    if args.list:
        print(f"{'ID':35s} {'Category':15s} {'Cases':5s}")
        print("-" * 60)
        for cid, c in sorted(CHECKS.items()):
            print(f"{cid:35s} {c.category:15s} {len(c.cases)}")
        print(f"\nTotal: {len(CHECKS)} checks")
        return 0

    if args.check:
        output = run_checks(
            categories=args.category,
            check_ids=args.checks,
            output_file=args.output,
            verbose=not args.quiet,
        )
        return 1 if output.get("failures") else 0

    if args.zeta is None and args.logintegral is None:
        parser.print_help()
        return 2

    try:
        if args.zeta is not None:
            if args.seed is None:
                print(f"zeta({args.zeta!r}) = {zeta(args.zeta, stream=stream)!r}")
            else:
                out = zeta(Dual.seed(args.zeta, args.seed), stream=stream)
                print(f"zeta({args.zeta!r}) = {out.value!r}")
                print(f"dzeta/ds * {args.seed!r} = {out.derivative!r}")
        if args.logintegral is not None:
            alpha, z, w, m = args.logintegral
            value = log_integral_transform(alpha, z, w, m, stream=stream)
            print(f"log_integral_transform({alpha!r}, {z!r}, {w!r}, {m!r}) = {value!r}")
    except DomainError as e:
        print(f"Domain error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
