"""
Pacing presets.

Games publish a dict of named presets (tuning bundles); launchers pick one
by name from the command line.
"""

from typing import Dict, List, TypeVar

T = TypeVar('T')


def get_pacing_preset(
    presets: Dict[str, T],
    name: str,
    default: str = 'classic'
) -> T:
    """
    Get a pacing preset by name with fallback.

    Args:
        presets: Dict mapping preset names to preset objects
        name: Requested preset name
        default: Fallback preset name if requested not found

    Returns:
        The preset object

    Raises:
        ValueError: If presets is empty
    """
    if not presets:
        raise ValueError("No pacing presets defined")
    if name in presets:
        return presets[name]
    if default in presets:
        return presets[default]
    return next(iter(presets.values()))


def get_pacing_names(presets: Dict[str, T]) -> List[str]:
    """Get the preset names in declaration order."""
    return list(presets.keys())
