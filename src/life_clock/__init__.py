"""Life Clock - remaining-lifespan statistics from a birth date and a few assumptions.

Architecture::

    lifespan/      Pure calculation core (used %, remaining units, event counts)
    schemas.py     Pydantic models (UserSettings in, LifeStats / LifeCalculation out)
    profile.py     Settings defaults, first-time setup, lifespan adjustment
    store.py       JSON settings store with metadata envelope
    renderers/     Pure data → HTML (dashboard page)
    flows/         Prefect orchestration (build renders site/index.html)

Data flow: store → profile (UserSettings) → lifespan.evaluate → renderers → site/

The core never reads the clock: every calculation takes ``now`` explicitly.
"""

__version__ = "0.1.0"

from life_clock.config import Settings
from life_clock.lifespan import calculate, evaluate
from life_clock.schemas import LifeCalculation, LifeStats, LifeStatus, UserSettings

__all__ = [
    "LifeCalculation",
    "LifeStats",
    "LifeStatus",
    "Settings",
    "UserSettings",
    "__version__",
    "calculate",
    "evaluate",
]
