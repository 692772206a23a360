import os
from typing import Callable, TypeVar

NumberT = TypeVar("NumberT", int, float)


def _env_str(env_var: str, *, default: str) -> str:
    """Return ``env_var`` stripped, falling back to ``default`` when unset or blank."""

    value = os.environ.get(env_var)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_number(
    env_var: str,
    parse: Callable[[str], NumberT],
    *,
    kind: str,
    default: NumberT,
    minimum: NumberT | None = None,
    maximum: NumberT | None = None,
) -> NumberT:
    raw = os.environ.get(env_var)
    if raw is None or not raw.strip():
        return default
    try:
        parsed = parse(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{env_var} must be {kind}") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    if maximum is not None and parsed > maximum:
        raise ValueError(f"{env_var} must be at most {maximum}")
    return parsed


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    return _env_number(env_var, int, kind="an integer", default=default, minimum=minimum)


def _env_float(
    env_var: str,
    *,
    default: float,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    return _env_number(
        env_var,
        float,
        kind="a float",
        default=default,
        minimum=minimum,
        maximum=maximum,
    )
