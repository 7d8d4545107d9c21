"""Interactive unit converter for length, temperature and mass."""

from __future__ import annotations

from enum import IntEnum

from rich import box
from rich.console import Console
from rich.panel import Panel


class Conversion(IntEnum):
    """The conversions offered by the menu, numbered as shown to the user."""

    METERS_TO_FEET = 1
    FEET_TO_METERS = 2
    CELSIUS_TO_FAHRENHEIT = 3
    FAHRENHEIT_TO_CELSIUS = 4
    KILOGRAMS_TO_POUNDS = 5
    POUNDS_TO_KILOGRAMS = 6


# Menu label, source unit, target unit, formula.
_TABLE = {
    Conversion.METERS_TO_FEET: ("Meters to Feet", "meters", "feet", lambda v: v * 3.28084),
    Conversion.FEET_TO_METERS: ("Feet to Meters", "feet", "meters", lambda v: v / 3.28084),
    Conversion.CELSIUS_TO_FAHRENHEIT: (
        "Celsius to Fahrenheit", "\u00b0C", "\u00b0F", lambda v: v * 9 / 5 + 32
    ),
    Conversion.FAHRENHEIT_TO_CELSIUS: (
        "Fahrenheit to Celsius", "\u00b0F", "\u00b0C", lambda v: (v - 32) * 5 / 9
    ),
    Conversion.KILOGRAMS_TO_POUNDS: ("Kilograms to Pounds", "kg", "lbs", lambda v: v * 2.20462),
    Conversion.POUNDS_TO_KILOGRAMS: ("Pounds to Kilograms", "lbs", "kg", lambda v: v / 2.20462),
}


def convert(conversion: Conversion, value: float) -> float:
    """Apply the conversion to a value."""
    return _TABLE[Conversion(conversion)][3](value)


def describe(conversion: Conversion, value: float) -> str:
    """Return the one-line result shown to the user, with two decimals."""
    _, source, target, formula = _TABLE[Conversion(conversion)]
    return f"{value:.2f} {source} = {formula(value):.2f} {target}"


def _read_word(console: Console, prompt: str, style: str) -> str:
    console.print(prompt, style=style, end="")
    try:
        parts = input().split()
    except EOFError:
        return ""
    return parts[0] if parts else ""


def main(argv: list[str] | None = None) -> int:
    """Run the interactive converter until the user chooses to exit."""
    console = Console(highlight=False)
    console.print(
        Panel(
            "Convert Meters \u21cc Feet | Celsius \u21cc Fahrenheit | Kilograms \u21cc Pounds",
            title="UNIT CONVERTER",
            box=box.DOUBLE,
            border_style="cyan",
            padding=(1, 2),
            expand=False,
        )
    )
    while True:
        console.print("\nSelect conversion type:", style="bold green")
        for conversion, (label, *_) in _TABLE.items():
            console.print(f"{conversion.value}. {label}")
        console.print("0. Exit")

        try:
            choice = int(_read_word(console, "Enter option: ", "yellow"))
        except ValueError:
            choice = 0
        if choice == 0:
            console.print("Goodbye! \U0001f31f", style="bright_magenta")
            return 0

        entry = _read_word(console, "Enter value: ", "cyan")
        try:
            if "_" in entry:
                raise ValueError(entry)
            value = float(entry)
        except ValueError:
            console.print("Invalid input! Please enter a numeric value.", style="red")
            continue

        if choice not in _TABLE:
            console.print("Invalid option! Please select between 0 and 6.", style="red")
            continue
        console.print(describe(Conversion(choice), value))


if __name__ == "__main__":
    raise SystemExit(main())