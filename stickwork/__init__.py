"""
Stickwork - a rhythm engine for drum practice patterns.

Stickwork models one bar of a drum exercise as two token streams edited side
by side: the voicing (which drums sound at each note slot) and the sticking
(which limb plays them). It keeps the two in step as either is edited,
derives accents and legacy phrase groupings, and lays polyrhythms out in
exact beat positions with the note values and tuplets needed to write them.

What it does:

- **Token grammar.** Voicing tokens such as ``S``, ``S+K``, ``(S)`` and
  sticking tokens such as ``R``, ``K``, ``lR`` (flam), ``rrL`` (drag).
  Unknown instrument letters become snare instead of failing.
- **Bar arithmetic.** Note slots per beat and per bar for any time
  signature and subdivision, including triplet grids and per-beat
  subdivisions (``advanced mode``), with exact ``Fraction`` positions.
- **Voicing/sticking synchronization.** Rests line up, the kick limb sits
  exactly where the kick sounds, and every other sticking choice survives
  an edit. Practice pad mode locks the voicing to snare and never uses the
  kick limb.
- **Accents.** Accent indices are authoritative; legacy groupings such as
  ``"4 4 4 4"`` convert both ways without loss.
- **Polyrhythms.** N:M positions, coincidences, note values and tuplets.
- **Generation.** Random patterns, accents and per-beat grids from an
  injectable ``random.Random``.

Minimal example:

    ```python
    import stickwork

    pattern = stickwork.Pattern.from_text("4/4", 16, voicing="S S K S", sticking="R L K R")
    pattern = pattern.with_voicing("S - K S")   # sticking becomes R - K R

    for slot in stickwork.note_slots(pattern):
        print(slot.index, slot.voicing_keys, slot.sticking_glyph)
    ```

Package-level exports: ``Pattern``, ``PolyrhythmPattern``, ``EngineConfig``,
``default_pattern``, ``note_slots``, ``generate_polyrhythm_pattern``,
``generate_random_pattern``, ``load_config``.
"""

import stickwork.config
import stickwork.generator
import stickwork.pattern
import stickwork.polyrhythm


Pattern = stickwork.pattern.Pattern
PolyrhythmPattern = stickwork.polyrhythm.PolyrhythmPattern
EngineConfig = stickwork.config.EngineConfig
default_pattern = stickwork.pattern.default_pattern
note_slots = stickwork.pattern.note_slots
generate_polyrhythm_pattern = stickwork.polyrhythm.generate_polyrhythm_pattern
generate_random_pattern = stickwork.generator.generate_random_pattern
load_config = stickwork.config.load_config
