"""Musical note names usable wherever a note number is expected."""

from enum import IntEnum

from .soundmath import get_midi_note, note_to_frequency


class Note(IntEnum):
    """The twelve notes of an octave, C being zero."""

    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    def frequency(self, octave):
        """Frequency in Hz of this note in ``octave``."""
        return note_to_frequency(float(get_midi_note(octave, self)))