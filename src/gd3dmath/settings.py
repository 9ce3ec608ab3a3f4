"""
Process-wide diagnostic switches for gd3dmath.

The math functions never raise on degenerate numeric input; they return
inf/nan, or the identity in the case of a singular inverse. These switches let
a caller ask to be told when that happens while debugging.

Usage:
    from gd3dmath import settings

    settings.set_singular_warnings(True)
    invert(singular_matrix)   # RuntimeWarning: ... falling back to identity
"""


# =============================================================================
# Singular inverse diagnostics
# =============================================================================

_singular_warnings = False


def set_singular_warnings(enabled: bool) -> None:
    """
    Enable or disable the RuntimeWarning emitted when invert() meets a
    matrix with a zero determinant and falls back to the identity.

    Args:
        enabled: True to warn, False (default) to stay silent.
    """
    global _singular_warnings
    if not isinstance(enabled, bool):
        raise ValueError(f"Expected a bool, got {type(enabled).__name__}")
    _singular_warnings = enabled


def get_singular_warnings() -> bool:
    """Whether invert() warns on its singular-matrix fallback."""
    return _singular_warnings
