"""Constants for stickwork.

This package contains the fixed vocabularies the rhythm engine works with:

- ``stickwork.constants.instruments`` - Voicing alphabet (snare, kick, toms, hi-hat)
- ``stickwork.constants.limbs`` - Sticking alphabet (hands, kick, rest, ornaments)
- ``stickwork.constants.durations`` - Notated duration codes and their lengths in beats
- ``stickwork.constants.subdivisions`` - The supported subdivision grids
- ``stickwork.constants.sticking_patterns`` - Common rudiment sticking cells
- ``stickwork.constants.polyrhythms`` - Common polyrhythm ratios
"""
