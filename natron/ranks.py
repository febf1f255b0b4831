from dataclasses import dataclass

TERMINAL_RANK_NAME = "Lenda"


@dataclass(frozen=True)
class RankThreshold:
    name: str
    min_xp: int


# Ninja hierarchy, strictly increasing by threshold.
RANKS: tuple[RankThreshold, ...] = (
    RankThreshold("Estudante da Academia", 0),
    RankThreshold("Genin", 100),
    RankThreshold("Chunin", 500),
    RankThreshold("Tokubetsu Jonin", 1200),
    RankThreshold("Jonin", 2500),
    RankThreshold("ANBU", 3000),
    RankThreshold("Sannin", 5000),
    RankThreshold("Kage", 8000),
)

INITIAL_RANK = RANKS[0].name


@dataclass(frozen=True)
class RankProgress:
    rank: str
    min_xp: float
    next_rank_name: str
    next_rank_min_xp: float
    index: int


def rank_for(total_xp: float) -> RankProgress:
    """Resolve the rank reached with ``total_xp`` and the one after it.

    Past the last threshold the next rank is the open-ended "Lenda"; its
    ``next_rank_min_xp`` is ``total_xp * 2`` so progress bars have something
    to fill towards. It is not a real threshold.
    """
    index = 0
    for i, threshold in enumerate(RANKS):
        if total_xp >= threshold.min_xp:
            index = i
        else:
            break

    current = RANKS[index]
    if index + 1 < len(RANKS):
        following = RANKS[index + 1]
        next_name, next_min = following.name, following.min_xp
    else:
        next_name, next_min = TERMINAL_RANK_NAME, total_xp * 2

    return RankProgress(
        rank=current.name,
        min_xp=current.min_xp,
        next_rank_name=next_name,
        next_rank_min_xp=next_min,
        index=index,
    )


def rank_index(name: str) -> int:
    for i, threshold in enumerate(RANKS):
        if threshold.name == name:
            return i
    raise ValueError(f"Unknown rank: {name}")
