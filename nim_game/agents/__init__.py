"""
Player registry for NIM.
Agent classes register themselves with @register_agent("name"); auto-play in the CLI
looks them up by name through AGENT_MAP or create_agent.
"""

import importlib

# Modules whose import runs the @register_agent decorators
_AGENT_MODULES = ("optimal_agent", "random_agent")

AGENT_MAP = {}


def register_agent(name):
    """
    Class decorator adding an Agent subclass to AGENT_MAP under 'name'.
    Raises:
        ValueError: If another class already uses that name.
    """
    def decorator(cls):
        existing = AGENT_MAP.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(f"Agent name '{name}' is already taken by {existing.__name__}")
        AGENT_MAP[name] = cls
        return cls
    return decorator


def create_agent(name, **kwargs):
    """Instantiate the agent registered under 'name'; kwargs go to its constructor."""
    try:
        cls = AGENT_MAP[name]
    except KeyError:
        known = ", ".join(sorted(AGENT_MAP))
        raise KeyError(f"Unknown agent '{name}' (known: {known})") from None
    return cls(**kwargs)


for _module in _AGENT_MODULES:
    importlib.import_module(f"{__name__}.{_module}")
