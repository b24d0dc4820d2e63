from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Tuple

DATA_DIR = Path(__file__).resolve().parent / "data"
STATES_DISTRICTS_PATH = DATA_DIR / "states_districts.json"
COUNTRY_CODES_PATH = DATA_DIR / "country_codes.json"

DEFAULT_STATE = "Madhya Pradesh"
DEFAULT_COUNTRY_CODE = "+91"


def _load_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


STATES_WITH_DISTRICTS: Dict[str, Tuple[str, ...]] = {
    entry["state"]: tuple(entry["districts"]) for entry in _load_json(STATES_DISTRICTS_PATH)
}
COUNTRY_CODES: List[Dict[str, str]] = _load_json(COUNTRY_CODES_PATH)
DIAL_CODES = frozenset(country["dial_code"] for country in COUNTRY_CODES)


def list_states() -> List[str]:
    return sorted(STATES_WITH_DISTRICTS)


def districts_for(state: str | None) -> Tuple[str, ...]:
    if not state:
        return ()
    return STATES_WITH_DISTRICTS.get(state, ())


def is_known_state(state: str | None) -> bool:
    return bool(state) and state in STATES_WITH_DISTRICTS


def district_belongs_to(state: str | None, district: str | None) -> bool:
    return bool(district) and district in districts_for(state)


def is_known_dial_code(code: str | None) -> bool:
    return bool(code) and code in DIAL_CODES
