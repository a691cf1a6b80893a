#!/usr/bin/env python3

"""
Interactive number system converter.
Usage: python radix_menu.py
"""

from typing import NamedTuple

from rich.console import Console
from rich.markup import escape

from radix_convert import ConversionError, decode, encode, parse_decimal

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


class Conversion(NamedTuple):
    source_base: int
    target_base: int
    source_name: str
    target_name: str

    @property
    def title(self) -> str:
        return f"{self.source_name.capitalize()} to {self.target_name}"


CONVERSIONS = (
    Conversion(2, 10, "binary", "Decimal"),
    Conversion(10, 2, "decimal", "Binary"),
    Conversion(8, 10, "octal", "Decimal"),
    Conversion(10, 8, "decimal", "Octal"),
    Conversion(16, 10, "hexadecimal", "Decimal"),
    Conversion(10, 16, "decimal", "Hexadecimal"),
    Conversion(2, 8, "binary", "Octal"),
    Conversion(8, 2, "octal", "Binary"),
    Conversion(2, 16, "binary", "Hexadecimal"),
    Conversion(16, 2, "hexadecimal", "Binary"),
    Conversion(8, 16, "octal", "Hexadecimal"),
    Conversion(16, 8, "hexadecimal", "Octal"),
)

EXIT_CHOICE = 0
CHOICE_WIDTH = len(str(len(CONVERSIONS)))


class InvalidMenuChoice(ValueError):
    pass


def parse_choice(text: str) -> int:
    if not (text.isascii() and text.isdigit()) or len(text) > CHOICE_WIDTH:
        raise InvalidMenuChoice(f"'{text}' is not a menu option.")

    choice = int(text)

    if choice != EXIT_CHOICE and not 1 <= choice <= len(CONVERSIONS):
        raise InvalidMenuChoice(f"{choice} is not a menu option.")
    return choice


def show_menu() -> None:
    console.print("\n[bold]Number System Converter[/bold]")
    console.print("-----------------------")
    for number, conversion in enumerate(CONVERSIONS, start=1):
        console.print(f"{number}. {conversion.title}")
    console.print(f"{EXIT_CHOICE}. Exit")


def convert(text: str, conversion: Conversion) -> str:
    if conversion.source_base == 10:
        value = parse_decimal(text)
    else:
        value = decode(text, conversion.source_base)

    if conversion.target_base == 10:
        return str(value)
    return encode(value, conversion.target_base)


def perform_conversion(conversion: Conversion) -> None:
    text = console.input(f"Enter {conversion.source_name} number: ").strip()

    try:
        result = convert(text, conversion)
    except ConversionError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return

    console.print(f"{conversion.target_name} equivalent: [bold green]{result}[/bold green]")


def run_menu() -> None:
    while True:
        show_menu()
        try:
            raw_choice = console.input("Enter your choice: ").strip()
            try:
                choice = parse_choice(raw_choice)
            except InvalidMenuChoice:
                console.print("[yellow]Invalid choice. Please try again.[/yellow]")
                continue

            if choice == EXIT_CHOICE:
                console.print("Exiting program.")
                return

            perform_conversion(CONVERSIONS[choice - 1])
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting.")
            return


def main() -> int:
    run_menu()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
