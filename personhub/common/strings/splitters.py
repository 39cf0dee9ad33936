from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    """Accept a CSV string (as env vars arrive) or a list; drop blank entries."""
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(s).strip() for s in v if s is not None and str(s).strip()]
    raw = str(v).strip()
    # pydantic-settings hands over JSON for complex fields; tolerate a JSON-ish list too
    if raw.startswith("[") and raw.endswith("]"):
        raw = raw[1:-1].replace('"', "").replace("'", "")
    return [s.strip() for s in raw.split(",") if s.strip()]
