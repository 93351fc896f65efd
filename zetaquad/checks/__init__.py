"""Registry of the numerical checks, keyed by id."""

from itertools import chain

from zetaquad.checks import logintegral, zeta


def _index(*modules) -> dict:
    checks = {}
    for c in chain.from_iterable(m.ALL for m in modules):
        if c.id in checks:
            raise ValueError(f"duplicate check id {c.id!r}")
        checks[c.id] = c
    return checks


CHECKS = _index(logintegral, zeta)


def get_check(check_id: str):
    return CHECKS[check_id]


def get_checks_by_category(category: str):
    return [c for c in CHECKS.values() if c.category == category]
