from srccli.models.kvp import KeyValuePair
from srccli.models.targets import Target, Targets

__all__ = ["KeyValuePair", "Target", "Targets"]
