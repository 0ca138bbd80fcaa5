"""
housebuilder package

This package illustrates the Builder pattern by assembling houses step by step.

Key responsibilities are split across modules:
- `house.py`: the product, an ordered list of part labels
- `builders.py`: the builder protocol and its concrete variants
- `director.py`: fixed step sequences ("recipes") run against a bound builder
- `plan_parser.py`: parse YAML demo plans into a structured configuration
- `demo.py`: play a plan the way a client of the pattern would
- `renderer.py`: render the demo report with Jinja2
- `cli.py`: CLI entrypoint (parse -> run -> render)
"""

from __future__ import annotations

from housebuilder.builders import CastleBuilder, HouseBuilder, HouseProductBuilder, PlainHouseBuilder
from housebuilder.director import Director, UnboundBuilderError
from housebuilder.house import House

__all__ = [
    "CastleBuilder",
    "Director",
    "House",
    "HouseBuilder",
    "HouseProductBuilder",
    "PlainHouseBuilder",
    "UnboundBuilderError",
    "__version__",
]

__version__ = "0.1.0"
