# debug.py
from __future__ import annotations

import logging
from typing import Dict, Iterable

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encrypt")


class Debug:
    """Per-component debug tracing on top of :mod:`logging`.

    Every module creates its own ``Debug()`` at import time, but the switch
    board is shared: enabling ``"stepping"`` from the CLI lights up the
    stepping trace inside the engine as well.
    """

    _root_configured: bool = False
    _switches: Dict[str, bool] = {c: False for c in COMPONENTS}
    _enabled: bool = True

    def __init__(self, *, log_to: str | None = None, name: str = "ROTOR") -> None:
        if log_to or not Debug._root_configured:
            Debug.configure(log_to=log_to)
        self.logger = logging.getLogger(name)

    @classmethod
    def configure(cls, *, log_to: str | None = None, level: int = logging.DEBUG) -> None:
        """Set up the root handlers once; a later *log_to* adds a file sink."""
        if not cls._root_configured:
            logging.basicConfig(
                level=level,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=[logging.StreamHandler()],
            )
            cls._root_configured = True
        if log_to:
            logging.getLogger().addHandler(logging.FileHandler(log_to, encoding="utf-8"))

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug._enabled and Debug._switches.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def active(self, component: str) -> bool:
        """Cheap check so callers can skip building expensive messages."""
        return Debug._enabled and Debug._switches.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        self._set(components, True)

    def disable(self, *components: str) -> None:
        self._set(components, False)

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug._switches[component] = not Debug._switches[component]

    def toggle_global(self, state: bool) -> None:
        """Master switch; component settings survive a round trip."""
        Debug._enabled = state

    def reset(self) -> None:
        """Silence every component and turn the master switch back on."""
        Debug._switches = {c: False for c in COMPONENTS}
        Debug._enabled = True

    def status(self) -> Dict[str, bool]:
        return Debug._switches.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _set(self, components: Iterable[str], state: bool) -> None:
        components = list(components)
        for c in components:
            self._require(c)
        for c in components:
            Debug._switches[c] = state

    @staticmethod
    def _require(component: str) -> None:
        if component not in COMPONENTS:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._switches.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"
