from .permission_gate import KNOWN_ACCESS_NAMES, PermissionGate, get_permission_gate, seed_access

__all__ = [
    "KNOWN_ACCESS_NAMES",
    "PermissionGate",
    "get_permission_gate",
    "seed_access",
]
