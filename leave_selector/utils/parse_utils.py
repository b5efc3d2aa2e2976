# utils/parse_utils.py
WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def parse_weekday_list(text: str) -> list[int] | None:
    """
    '1, 3,5' -> [1, 3, 5]      (0=Sun .. 6=Sat)
    'mon,wed' -> [1, 3]
    '' or 'all' -> None        (no restriction)
    Unknown tokens are ignored, duplicates dropped. ValueError when no
    token names a weekday.
    """
    text = text.strip()
    if not text or text.lower() == "all":
        return None
    names = [n.lower() for n in WEEKDAY_NAMES]
    seen = set()
    out = []
    for tok in text.split(","):
        tok = tok.strip().lower()
        if not tok:
            continue
        if tok.isdigit() and int(tok) <= 6:
            n = int(tok)
        elif tok[:3] in names:
            n = names.index(tok[:3])
        else:
            continue
        if n not in seen:
            seen.add(n)
            out.append(n)
    if not out:
        raise ValueError(f"no weekday in {text!r}")
    return sorted(out)


def format_weekdays(days) -> str:
    if days is None:
        return "all"
    return ",".join(WEEKDAY_NAMES[d] for d in sorted(days))


def parse_quota(text: str) -> int | None:
    """'3' -> 3, '' / 'none' / '-' -> None (no cap). Raises ValueError otherwise."""
    text = text.strip().lower()
    if text in ("", "none", "-"):
        return None
    n = int(text)
    if n < 0:
        raise ValueError(f"quota must be >= 0, got {n}")
    return n
