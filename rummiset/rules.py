from dataclasses import dataclass

MIN_SET_SIZE = 3
MAX_GROUP_SIZE = 4


@dataclass(frozen=True)
class Ruleset:
    min_set_size: int = MIN_SET_SIZE
    max_group_size: int = MAX_GROUP_SIZE

    def __post_init__(self) -> None:
        if self.min_set_size < MIN_SET_SIZE:
            raise ValueError(f"min_set_size must be at least {MIN_SET_SIZE}")
        if not MIN_SET_SIZE <= self.max_group_size <= MAX_GROUP_SIZE:
            raise ValueError(f"max_group_size must be between {MIN_SET_SIZE} and {MAX_GROUP_SIZE}")
