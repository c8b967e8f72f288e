from datetime import date
from typing import Any, Dict, Optional, Sequence
import json


def export_json(rows: Sequence[Dict[str, Any]]) -> Optional[str]:
    """Working subset as a JSON array; fields keep their row order."""
    if not rows:
        return None
    return json.dumps(list(rows), indent=2, ensure_ascii=False, default=str)


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"data_export_{today.isoformat()}.json"
