"""
Team directory - Nepal Premier League franchises, short names and colours
"""

FRANCHISE_TEAMS = [
    {"name": "Biratnagar Kings (NPL)", "short_name": "BIK", "primary_color": "#E63946"},
    {"name": "Janakpur Bolts (NPL)", "short_name": "JAB", "primary_color": "#F4A261"},
    {"name": "Kathmandu Gurkhas (NPL)", "short_name": "KAG", "primary_color": "#2A9D8F"},
    {"name": "Kathmandu Gorkhas (NPL)", "short_name": "KAG", "primary_color": "#2A9D8F"},  # alternate spelling
    {"name": "Chitwan Rhinos (NPL)", "short_name": "CHR", "primary_color": "#264653"},
    {"name": "Karnali Yaks (NPL)", "short_name": "KAY", "primary_color": "#8338EC"},
    {"name": "Lumbini Lions (NPL)", "short_name": "LUL", "primary_color": "#FB5607"},
    {"name": "Pokhara Avengers (NPL)", "short_name": "POA", "primary_color": "#3A86FF"},
    {"name": "Sudur Paschim Royals (NPL)", "short_name": "SPR", "primary_color": "#FF006E"},
]

DEFAULT_COLOR = "#6B7280"

_BY_NAME = {t["name"]: t for t in FRANCHISE_TEAMS}
_BY_SHORT = {t["short_name"]: t for t in FRANCHISE_TEAMS}


def get_team_short_name(name: str) -> str:
    team = _BY_NAME.get(name)
    if team:
        return team["short_name"]
    return name[:3].upper()


def get_team_color(name: str) -> str:
    team = _BY_NAME.get(name) or _BY_SHORT.get(name)
    return team["primary_color"] if team else DEFAULT_COLOR


def performance_band(win_rate: float) -> str:
    """Bucket a win percentage for display"""
    if win_rate >= 70:
        return "excellent"
    elif win_rate >= 50:
        return "good"
    elif win_rate >= 30:
        return "average"
    return "poor"
