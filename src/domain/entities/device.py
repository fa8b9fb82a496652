"""Domain entity for devices that maintenance tasks point at."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass
class Device:
    """A piece of equipment registered in the document store."""

    name: str
    id: Optional[str] = None
    year: Optional[Union[int, float]] = None
    type: Optional[str] = None
