import random

DEFAULT_MAX_ATTEMPTS = 64


def _sampling_error(location: str, issue: str, hint: str) -> str:
    return f"{location}: {issue}. Fix: {hint}."


def sample_unique(
    population_size: int,
    already_chosen: set[int],
    rng: random.Random,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> int:
    """
    Draw one id from 1..population_size that is not yet in already_chosen.

    Rejection sampling: draw uniformly, keep the first id not seen before.
    After max_attempts rejected draws, pick uniformly from the ids still free,
    so a nearly-full set cannot stall the caller. The accepted id is added to
    already_chosen.
    """
    if population_size <= 0:
        raise ValueError(
            _sampling_error(
                "sample_unique",
                f"population_size must be > 0 (got {population_size})",
                "pass the number of ids available to draw from",
            )
        )
    if len(already_chosen) >= population_size:
        raise ValueError(
            _sampling_error(
                "sample_unique",
                f"all {population_size} ids are already chosen",
                "request no more unique ids than the population holds",
            )
        )

    for _ in range(max_attempts):
        candidate = rng.randint(1, population_size)
        if candidate not in already_chosen:
            already_chosen.add(candidate)
            return candidate

    free = [i for i in range(1, population_size + 1) if i not in already_chosen]
    candidate = rng.choice(free)
    already_chosen.add(candidate)
    return candidate


def sample_unique_ids(population_size: int, count: int, rng: random.Random) -> list[int]:
    """Return `count` distinct ids from 1..population_size, in draw order."""
    if count < 0 or count > population_size:
        raise ValueError(
            _sampling_error(
                "sample_unique_ids",
                f"count={count} must be between 0 and population_size={population_size}",
                "lower count or enlarge the population",
            )
        )

    chosen: set[int] = set()
    return [sample_unique(population_size, chosen, rng) for _ in range(count)]
