"""
.splice to Standard MIDI File exporter.

Writes each track record as its own MIDI track on the GM drum channel,
one sixteenth-note hit per active step.
"""

import math
from pathlib import Path
from typing import Dict, Union

import mido

from splicedrum.models.pattern import Pattern
from splicedrum.models.track import STEP_COUNT, TrackRecord

# GM drum channel 10 (0-based)
DRUM_CHANNEL = 9

TICKS_PER_BEAT = 480
STEPS_PER_BEAT = 4
DEFAULT_TEMPO = 120.0
MAX_MIDI_TEMPO = 0xFFFFFF

# GM percussion key range
GM_LOW_NOTE = 35
GM_HIGH_NOTE = 81

# Drum names seen in .splice files -> GM percussion notes
GM_DRUM_NOTES: Dict[str, int] = {
    "kick": 36,
    "bass drum": 36,
    "snare": 38,
    "clap": 39,
    "hh-close": 42,
    "hihat": 42,
    "hh-open": 46,
    "low-tom": 45,
    "mid-tom": 47,
    "hi-tom": 50,
    "crash": 49,
    "ride": 51,
    "cowbell": 56,
    "maracas": 70,
    "shaker": 70,
}


def drum_note(track: TrackRecord) -> int:
    """
    Pick the GM percussion note for a track.

    Known names map through GM_DRUM_NOTES (case-insensitive, first word
    tried too, so "Kick 2" plays a kick); anything else is spread over the
    GM range by id.
    """
    name = track.name.strip().lower()
    if name in GM_DRUM_NOTES:
        return GM_DRUM_NOTES[name]
    first = name.split(" ", 1)[0]
    if first in GM_DRUM_NOTES:
        return GM_DRUM_NOTES[first]
    return GM_LOW_NOTE + track.id % (GM_HIGH_NOTE - GM_LOW_NOTE + 1)


def midi_tempo(bpm: float) -> int:
    """
    Convert BPM to a set_tempo value.

    Non-positive and non-finite tempos fall back to 120 BPM. Others are
    clamped to what a set_tempo event can hold.
    """
    if not math.isfinite(bpm) or bpm <= 0:
        bpm = DEFAULT_TEMPO
    return max(1, min(mido.bpm2tempo(bpm), MAX_MIDI_TEMPO))


class SpliceToMidiConverter:
    """
    Converter from decoded Pattern objects to MIDI files.

    Example:
        converter = SpliceToMidiConverter(bars=4)
        midi = converter.convert(pattern)
        midi.save("pattern.mid")
    """

    def __init__(self, bars: int = 1, velocity: int = 100, gate: float = 0.5):
        if bars < 1:
            raise ValueError(f"bars must be at least 1, got {bars}")
        if not 1 <= velocity <= 127:
            raise ValueError(f"velocity must be 1-127, got {velocity}")
        self.bars = bars
        self.velocity = velocity
        self.step_ticks = TICKS_PER_BEAT // STEPS_PER_BEAT
        self.note_ticks = max(1, min(self.step_ticks, int(self.step_ticks * gate)))

    def convert(self, pattern: Pattern) -> mido.MidiFile:
        """
        Convert a Pattern to a type 1 MIDI file.

        Args:
            pattern: Decoded pattern

        Returns:
            MidiFile with a tempo track plus one track per record
        """
        midi = mido.MidiFile(type=1, ticks_per_beat=TICKS_PER_BEAT)

        meta = mido.MidiTrack()
        meta.append(mido.MetaMessage("track_name", name=pattern.version, time=0))
        meta.append(mido.MetaMessage("set_tempo", tempo=midi_tempo(pattern.tempo), time=0))
        meta.append(mido.MetaMessage("time_signature", numerator=4, denominator=4, time=0))
        meta.append(mido.MetaMessage("end_of_track", time=0))
        midi.tracks.append(meta)

        for track in pattern.tracks:
            midi.tracks.append(self._convert_track(track))

        return midi

    def _convert_track(self, track: TrackRecord) -> mido.MidiTrack:
        note = drum_note(track)
        events = mido.MidiTrack()
        events.append(mido.MetaMessage("track_name", name=track.name, time=0))

        now = 0
        last = 0
        for bar in range(self.bars):
            for index, active in enumerate(track.steps):
                if not active:
                    continue
                start = (bar * STEP_COUNT + index) * self.step_ticks
                events.append(
                    mido.Message(
                        "note_on",
                        channel=DRUM_CHANNEL,
                        note=note,
                        velocity=self.velocity,
                        time=start - last,
                    )
                )
                events.append(
                    mido.Message(
                        "note_off",
                        channel=DRUM_CHANNEL,
                        note=note,
                        velocity=0,
                        time=self.note_ticks,
                    )
                )
                last = start + self.note_ticks
            now = (bar + 1) * STEP_COUNT * self.step_ticks

        events.append(mido.MetaMessage("end_of_track", time=max(now - last, 0)))
        return events


def convert_splice_to_midi(
    pattern: Pattern, output_path: Union[str, Path], bars: int = 1
) -> mido.MidiFile:
    """
    Export a Pattern to a .mid file.

    Args:
        pattern: Decoded pattern
        output_path: Destination .mid path
        bars: Number of times the 16-step bar is repeated

    Returns:
        The written MidiFile
    """
    midi = SpliceToMidiConverter(bars=bars).convert(pattern)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    midi.save(str(output_path))

    return midi
