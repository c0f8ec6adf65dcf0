from typing import Any, Dict, Optional

import yaml


def split_front_matter(content: str) -> Optional[str]:
    """Return the raw YAML between the leading ``---`` fences, if any."""
    if not content.startswith("---\n"):
        return None
    rest = content[len("---\n"):]
    end = rest.find("\n---")
    if end < 0:
        return None
    return rest[:end]


def parse_front_matter(content: str) -> Optional[Dict[str, Any]]:
    """Best-effort front matter parse; malformed YAML counts as absent."""
    raw = split_front_matter(content)
    if raw is None:
        return None
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError:
        return None
    if not isinstance(data, dict):
        return None
    return data


def front_matter_title(content: str) -> Optional[str]:
    data = parse_front_matter(content)
    if not data:
        return None
    title = data.get("title")
    if title is None:
        return None
    title = str(title).strip()
    return title or None


__all__ = ["split_front_matter", "parse_front_matter", "front_matter_title"]
