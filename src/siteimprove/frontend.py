"""Front-end library ids and settings for the Siteimprove overlay."""

from typing import TypedDict

OVERLAY_LIBRARY = "siteimprove/siteimprove.overlay"
LIBRARY = "siteimprove/siteimprove"

# Overlay actions: submit new URLs, or ask Siteimprove to recheck them
INPUT_URL = "input_url"
RECHECK_URL = "recheck_url"
ACTIONS = (INPUT_URL, RECHECK_URL)


class SettingsDict(TypedDict):
    """Settings payload consumed by the overlay script."""

    url: list[str]
    auto: bool


def get_overlay_library() -> str:
    return OVERLAY_LIBRARY


def get_library() -> str:
    return LIBRARY


def get_settings(urls: list[str], action: str, auto: bool = True) -> SettingsDict:
    """Build the overlay settings.

    Args:
        urls: URLs to input or recheck
        action: One of "input_url" or "recheck_url"
        auto: Call the action automatically when the overlay loads

    Returns:
        Settings dictionary

    Raises:
        ValueError: If action is unknown
    """
    if action not in ACTIONS:
        raise ValueError(f"Unknown action: {action}")
    return {"url": list(urls), "auto": auto}
