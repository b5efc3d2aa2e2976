# data/data_manager.py
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from leave_selector.exceptions import LeaveRuleError
from leave_selector.models.assignment import Assignment
from leave_selector.models.leave_category import LeaveCategory

log = logging.getLogger(__name__)

# project root = .../leave_selector
BASE_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = Path(os.getenv("LEAVE_SELECTOR_DATA_DIR") or BASE_DIR / "data")
CATEGORIES_FILE = "leave_categories.json"
ASSIGNMENTS_FILE = "assignments.json"


def _dir(data_dir: Optional[Path]) -> Path:
    return Path(data_dir) if data_dir is not None else DATA_DIR


def _safe_json_load(path: Path, default):
    if not path.exists():
        return default
    try:
        raw = path.read_text(encoding="utf-8").strip()
        if not raw:
            return default
        return json.loads(raw)
    except (OSError, ValueError) as e:
        log.warning("could not read %s, starting from defaults: %s", path, e)
        return default


def _safe_json_save(path: Path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(path)


def has_saved_state(data_dir: Optional[Path] = None) -> bool:
    d = _dir(data_dir)
    return (d / CATEGORIES_FILE).exists() and (d / ASSIGNMENTS_FILE).exists()


# ---------- leave categories ----------
def load_categories(data_dir: Optional[Path] = None) -> List[LeaveCategory]:
    path = _dir(data_dir) / CATEGORIES_FILE
    data = _safe_json_load(path, default=[])
    out = []
    for item in data if isinstance(data, list) else []:
        try:
            out.append(LeaveCategory.from_dict(item))
        except (LeaveRuleError, TypeError, AttributeError) as e:
            log.warning("skipping bad leave category in %s: %s", path, e)
    return out


def save_categories(categories: List[LeaveCategory], data_dir: Optional[Path] = None) -> None:
    payload = [c.to_dict() for c in categories]
    _safe_json_save(_dir(data_dir) / CATEGORIES_FILE, payload)


# ---------- assignments ----------
def load_assignments(data_dir: Optional[Path] = None) -> List[Assignment]:
    path = _dir(data_dir) / ASSIGNMENTS_FILE
    data = _safe_json_load(path, default=[])
    out = []
    for item in data if isinstance(data, list) else []:
        try:
            out.append(Assignment.from_dict(item))
        except (KeyError, TypeError) as e:
            log.warning("skipping bad assignment in %s: %r", path, e)
    return out


def save_assignments(assignments: List[Assignment], data_dir: Optional[Path] = None) -> None:
    payload = [a.to_dict() for a in assignments]
    _safe_json_save(_dir(data_dir) / ASSIGNMENTS_FILE, payload)
