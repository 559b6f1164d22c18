from __future__ import annotations

from platform_core.config import _test_hooks


class FakeEnv:
    """In-memory environment installed through the config get_env hook."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)

    def get(self, key: str) -> str | None:
        return self._values.get(key)


def make_fake_env(values: dict[str, str] | None = None) -> FakeEnv:
    """Install an empty (or pre-seeded) fake environment and return it.

    Config loaders read through the hook, so the real process environment is
    never consulted until reset_env() is called.
    """
    env = FakeEnv()
    if values is not None:
        for key, value in values.items():
            env.set(key, value)
    _test_hooks.get_env = env.get
    return env


def reset_env() -> None:
    """Restore the production environment reader."""
    _test_hooks.reset()


__all__ = ["FakeEnv", "make_fake_env", "reset_env"]
