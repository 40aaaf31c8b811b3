"""shipyard.py

Try:
    python examples/shipyard.py battlecruiser Excalibur 3
    python examples/shipyard.py battlecruiser Excalibur 3 --speed 3000 -cd
    python examples/shipyard.py battlecruiser Excalibur 3 -cd --armor-thick 280 --alliance-corp UFP AmaDyne

And some failures:
    python examples/shipyard.py battlecruiser Excalibur 3 -s 400000000
    python examples/shipyard.py battlecruiser Excalibur 3 -cd --cloak
    python examples/shipyard.py battlecruiser Excalibur 3 --armor-thick 160
"""
import sys

from rich.markup import escape

from typedargs import ArgumentAction, ArgumentError, ArgumentParser, ValueType
from typedargs.console import console


def build_parser() -> ArgumentParser:
    parser = ArgumentParser("shipyard", "Create new space ship(s)", combine_switches=True)

    parser.add_argument("class", "class", "Ship class (e.g., frigate, titan)").set_accept_set(
        "frigate,destroyer,cruiser,battlecruiser,battleship,carrier,transporter,recon"
    )
    parser.add_argument("shipName", "shipName", "Name of the ship (e.g., Enterprise)")
    parser.add_argument(
        "quantity", "quantity", "Number of ships", ValueType.INT
    ).set_accept_set(">0")

    speed = parser.add_argument(
        "speed", "-s", "Ship speed (m/s)", ValueType.FLOAT, alt_switches=["--speed"]
    )
    speed.set_default_val(1000.0)
    speed.set_accept_set(">0<299792458")

    parser.add_argument(
        "cloak",
        "-c",
        "Enable invisibility cloak",
        ValueType.BOOL,
        ArgumentAction.STORE_TRUE,
        alt_switches=["--cloak"],
    )
    parser.add_argument(
        "droneBay",
        "-d",
        "Equip drone bay",
        ValueType.BOOL,
        ArgumentAction.STORE_TRUE,
        alt_switches=["--drone-bay"],
    )
    parser.add_argument(
        "armorThick",
        "-a",
        "Armor thickness (cm)",
        ValueType.FLOAT,
        alt_switches=["--armor-thick"],
    ).set_accept_set(">10<100,>210<300")
    parser.add_argument(
        "alliCorp",
        "--alliance-corp",
        "Assign to alliance and corporation",
        nargs=2,
    )
    return parser


def main() -> int:
    parser = build_parser()
    if len(sys.argv) <= 1:
        parser.render_help()
        return 0
    try:
        parser.parse_args()
    except ArgumentError as error:
        console.print(f"[error]{escape(str(error))}[/]")
        return 2

    console.print("Input information:")
    console.print(f"  Ship class = {parser['class'].as_string()}")
    console.print(f"  Ship name = {parser['shipName'].as_string()}")
    console.print(f"  Quantity = {parser['quantity'].as_int()}")
    console.print(f"  Max speed = {parser['speed'].as_float()} m/s")
    console.print(f"  Invisibility cloak = {parser['cloak'].as_bool()}")
    console.print(f"  Drone bay = {parser['droneBay'].as_bool()}")
    if parser["armorThick"].is_set:
        console.print(f"  Armor thickness = {parser['armorThick'].as_float()} cm")
    if parser["alliCorp"].is_set:
        alliance, corporation = parser["alliCorp"].as_strings()
        console.print(f"  Alliance: {alliance}, corporation: {corporation}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
