from .registry import SCENARIO_BUILDERS, resolve_scenario

__all__ = ["SCENARIO_BUILDERS", "resolve_scenario"]
