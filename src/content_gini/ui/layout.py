"""Page chrome: app bar, drawer and the single-route navigator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import streamlit as st

DEFAULT_NAV_ITEMS = ("Content Improver",)


@dataclass
class DrawerState:
    """Whether the navigation drawer is shown. Passed to every renderer that needs it."""

    open: bool = False

    def open_drawer(self) -> None:
        self.open = True

    def close_drawer(self) -> None:
        self.open = False


@dataclass(frozen=True)
class ShellConfig:
    title: str = "Gen AI Utility"
    nav_items: tuple[str, ...] = DEFAULT_NAV_ITEMS
    drawer_width: int = 240


@dataclass(frozen=True)
class Page:
    path: str
    name: str
    render: Callable[[], None] = field(compare=False)


class Router:
    """Route table with a fallback; every unknown path lands on the fallback page."""

    def __init__(self, pages: list[Page], fallback: str = "/"):
        self.pages = {p.path: p for p in pages}
        if fallback not in self.pages:
            raise ValueError(f"Fallback route {fallback!r} is not registered")
        self.fallback = fallback

    def resolve(self, path: str | None) -> Page:
        return self.pages.get(path or self.fallback, self.pages[self.fallback])


def render_app_bar(drawer: DrawerState, shell: ShellConfig) -> None:
    """Title row with the menu button, hidden while the drawer is open."""
    if drawer.open:
        st.markdown(f"### {shell.title}")
        return
    menu_col, title_col = st.columns([1, 15])
    with menu_col:
        if st.button(":material/menu:", key="open_drawer", help="open drawer"):
            drawer.open_drawer()
            st.rerun()
    with title_col:
        st.markdown(f"### {shell.title}")


def render_drawer(drawer: DrawerState, shell: ShellConfig) -> None:
    if not drawer.open:
        return
    st.markdown(
        f"<style>[data-testid='stSidebar'] {{ min-width: {shell.drawer_width}px; "
        f"max-width: {shell.drawer_width}px; }}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        if st.button(":material/chevron_left:", key="close_drawer", help="close drawer"):
            drawer.close_drawer()
            st.rerun()
        st.divider()
        for i, item in enumerate(shell.nav_items):
            icon = ":material/inbox:" if i % 2 == 0 else ":material/mail:"
            st.markdown(f"{icon} {item}")
