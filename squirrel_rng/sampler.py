"""Deterministic batch draws driven by a single seed."""

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional

from .source import RandomSource

KINDS = ("float", "bool", "normal", "integer", "index", "item")


@dataclass
class DrawConfig:
    """Configuration for a batch of draws."""

    seed: int = 0x5EED
    offset: int = 0
    count: int = 10
    kind: str = "float"
    alpha: Optional[int] = None
    beta: Optional[int] = None
    odds: float = 0.5
    mean: float = 0.5
    deviation: float = 1.0
    choices: tuple[str, ...] = ()


def _drawer(rng: RandomSource, cfg: DrawConfig) -> Callable[[], Any]:
    if cfg.kind == "float":
        return rng.float
    if cfg.kind == "bool":
        return lambda: rng.bool(cfg.odds)
    if cfg.kind == "normal":
        return lambda: rng.normal(cfg.mean, cfg.deviation)
    if cfg.kind == "integer":
        if cfg.beta is not None and cfg.alpha is None:
            raise ValueError("Integer draws with 'beta' also need 'alpha' as the lower bound.")
        return lambda: rng.integer(cfg.alpha, cfg.beta)
    if cfg.kind == "index":
        return lambda: rng.array_index(cfg.choices)
    if cfg.kind == "item":
        return lambda: rng.array_item(cfg.choices)
    raise ValueError(f"Unknown draw kind '{cfg.kind}'; expected one of {', '.join(KINDS)}.")


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Produce ``cfg.count`` draws; identical configs give identical reports."""

    rng = RandomSource.from_seed(cfg.seed, cfg.offset)
    draw = _drawer(rng, cfg)
    draws: List[Any] = [draw() for _ in range(max(0, cfg.count))]

    return {
        "config": asdict(cfg),
        "draws": draws,
        "final": {
            "seed": rng.seed,
            "offset": rng.offset,
        },
    }
