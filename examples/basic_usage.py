"""Basic Cylindrica usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from datetime import date

from cylindrica import (
    Barrel,
    CarouselState,
    ManualScheduler,
    TimePicker,
    layout,
    parse_color,
    synthesize,
)


def demonstrate_colors() -> None:
    # Every supported notation parses to 8-bit channels.
    for text in ("#f80", "#ff880080", "rgb(255, 136, 0)", "hsl(32, 100%, 50%)"):
        print(f"{text!r:>24} ->", parse_color(text).value)


def demonstrate_gradients() -> None:
    # Shading ramps for an orange barrel with six facets.
    spec = synthesize("#ff8800", "#000000c0", faces=6)
    for name, css in spec.as_css().items():
        print(f"{name:>12}: {css}")


def demonstrate_layout() -> None:
    # A week band with the anchor on Monday, then half an item further.
    days = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
    for offset in (0, 0.5):
        visible = layout(CarouselState(days, offset, 7))
        row = ", ".join(
            f"{entry.item}{'*' if entry.hidden else ''}@{entry.angle:.2f}" for entry in visible
        )
        print(f"offset {offset}: {row}")


def demonstrate_interaction() -> None:
    # Press and hold the bottom control for two seconds on a virtual clock.
    clock = ManualScheduler()
    barrel = Barrel([f"{n:02d}" for n in range(60)], clock)
    barrel.hover_enter("bottom")
    barrel.press("bottom")
    clock.advance(2.0)
    barrel.release()
    clock.run_all()
    print("selected after holding:", barrel.selected)

    picker = TimePicker(clock, today=date.today(), every_n_minutes=5, ambient=True)
    clock.advance(1.0)
    picker.stop()
    print("picker after ambient rotation:", picker.values())


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
    demonstrate_layout()
    demonstrate_interaction()
