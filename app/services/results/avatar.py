"""이름 기반 기본 아바타(SVG data URL) 생성."""

from __future__ import annotations

from urllib.parse import quote

AVATAR_COLORS: list[str] = [
    "F44336",
    "E91E63",
    "9C27B0",
    "673AB7",
    "3F51B5",
    "2196F3",
    "03A9F4",
    "00BCD4",
    "009688",
    "4CAF50",
    "8BC34A",
    "CDDC39",
    "FFEB3B",
    "FFC107",
    "FF9800",
    "FF5722",
    "795548",
    "607D8B",
]

SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="128" height="128">'
    '<rect width="100%" height="100%" fill="#{color}"/>'
    '<text x="50%" y="50%" dominant-baseline="central" text-anchor="middle" '
    'font-family="Arial, sans-serif" font-size="64" fill="#fff">{initial}</text></svg>'
)


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _name_hash(text: str) -> int:
    """웹 클라이언트와 같은 색이 나오도록 32비트 시프트 해시를 재현한다."""

    value = 0
    for char in text:
        value = ord(char) + (_to_int32(_to_int32(value) << 5) - value)
    return value


def get_avatar_url(name: str) -> str:
    """이름 첫 글자와 해시 색상으로 아바타 URL을 만든다. 빈 이름이면 빈 문자열."""

    trimmed = name.strip()
    if not trimmed:
        return ""
    color = AVATAR_COLORS[abs(_name_hash(trimmed)) % len(AVATAR_COLORS)]
    svg = SVG_TEMPLATE.format(color=color, initial=trimmed[0])
    return "data:image/svg+xml;utf8," + quote(svg, safe="-_.!~*'()")


__all__ = ["AVATAR_COLORS", "get_avatar_url"]
