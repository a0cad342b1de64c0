"""Customer value attached to a sale.

Customers are created and validated outside this system; a sale only
keeps the identifying details it was opened for.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:

    dni: str
    name: str
    email: str = ""
