from __future__ import annotations
from dataclasses import dataclass
from ..constants import ANIMATION, AUTO_START, MIN_DELAY, REDUCE_BY, START_RATE, SUB_STEPS


@dataclass(frozen=True)
class Timing:
    """
    Tuning of press-and-hold scrolling, in seconds.

    Attributes:
        auto_start: Delay between a press and the first auto-repeat step
        animation: Duration of the smooth single step
        start_rate: Delay between the first two auto-repeat steps
        min_delay: Floor for the auto-repeat delay
        reduce_by: Factor applied to the delay after each auto-repeat step
        sub_steps: Increments the smooth single step is divided into
    """
    auto_start: float = AUTO_START
    animation: float = ANIMATION
    start_rate: float = START_RATE
    min_delay: float = MIN_DELAY
    reduce_by: float = REDUCE_BY
    sub_steps: int = SUB_STEPS

    def __post_init__(self) -> None:
        if self.sub_steps < 1:
            raise ValueError(f"sub_steps must be at least 1, got {self.sub_steps}")
        if self.animation > self.auto_start:
            raise ValueError("animation must not outlast auto_start")

    @property
    def sub_step_interval(self) -> float:
        return self.animation / self.sub_steps

    @property
    def repeat_lead(self) -> float:
        """Wait between the end of the smooth step and the first auto-repeat."""
        return self.auto_start - self.animation

    def next_rate(self, rate: float) -> float:
        return max(rate * self.reduce_by, self.min_delay)

    def ease(self, fraction: float) -> float:
        """Ease-out progress of the smooth step, 0 at the start and 1 at the end."""
        return 1 - (1 - fraction) ** 2
