"""MIDI 1.0 channel and system messages, note names and note numbers."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class Status(IntEnum):
    """MIDI status bytes."""

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    POLY_AFTERTOUCH = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_AFTERTOUCH = 0xD0
    PITCH_BEND = 0xE0
    SYSEX = 0xF0
    SONG_POSITION = 0xF2
    SONG_SELECT = 0xF3
    TUNE_REQUEST = 0xF6
    SYSEX_END = 0xF7
    TIMING_TICK = 0xF8
    START = 0xFA
    CONTINUE = 0xFB
    STOP = 0xFC
    ACTIVE_SENSING = 0xFE
    RESET = 0xFF


class Controller(IntEnum):
    """MIDI control change controller numbers."""

    BANK_SELECT = 0x00
    MODULATION = 0x01
    BREATH = 0x02
    FOOT = 0x04
    PORTAMENTO_TIME = 0x05
    DATA_ENTRY = 0x06
    CHANNEL_VOLUME = 0x07
    BALANCE = 0x08
    PAN = 0x0A
    EXPRESSION = 0x0B
    EFFECT_1 = 0x0C
    EFFECT_2 = 0x0D
    GENERAL_1 = 0x10
    GENERAL_2 = 0x11
    GENERAL_3 = 0x12
    GENERAL_4 = 0x13

    BANK_SELECT_LSB = 0x20
    MODULATION_LSB = 0x21
    BREATH_LSB = 0x22
    FOOT_LSB = 0x24
    PORTAMENTO_TIME_LSB = 0x25
    DATA_ENTRY_LSB = 0x26
    CHANNEL_VOLUME_LSB = 0x27
    BALANCE_LSB = 0x28
    PAN_LSB = 0x2A
    EXPRESSION_LSB = 0x2B
    EFFECT_1_LSB = 0x2C
    EFFECT_2_LSB = 0x2D
    GENERAL_1_LSB = 0x30
    GENERAL_2_LSB = 0x31
    GENERAL_3_LSB = 0x32
    GENERAL_4_LSB = 0x33

    SUSTAIN = 0x40
    PORTAMENTO = 0x41
    SOSTENUTO = 0x42
    SOFT_PEDAL = 0x43
    LEGATO = 0x44
    HOLD_2 = 0x45

    SOUND_CONTROLLER_1 = 0x46  # default: sound variation
    SOUND_CONTROLLER_2 = 0x47  # default: timbre / harmonic content
    SOUND_CONTROLLER_3 = 0x48  # default: release time
    SOUND_CONTROLLER_4 = 0x49  # default: attack time
    SOUND_CONTROLLER_5 = 0x4A  # default: brightness
    SOUND_CONTROLLER_6 = 0x4B
    SOUND_CONTROLLER_7 = 0x4C
    SOUND_CONTROLLER_8 = 0x4D
    SOUND_CONTROLLER_9 = 0x4E
    SOUND_CONTROLLER_10 = 0x4F

    GENERAL_5 = 0x50
    GENERAL_6 = 0x51
    GENERAL_7 = 0x52
    GENERAL_8 = 0x53

    PORTAMENTO_CONTROL = 0x54
    EFFECTS_1_DEPTH = 0x5B  # previously reverb send
    EFFECTS_2_DEPTH = 0x5C  # previously tremolo depth
    EFFECTS_3_DEPTH = 0x5D  # previously chorus depth
    EFFECTS_4_DEPTH = 0x5E  # previously celeste (detune) depth
    EFFECTS_5_DEPTH = 0x5F  # previously phaser effect depth
    DATA_INC = 0x60
    DATA_DEC = 0x61

    NONRPN_LSB = 0x62
    NONRPN_MSB = 0x63
    RPN_LSB = 0x64
    RPN_MSB = 0x65
    ALL_SOUNDS_OFF = 0x78
    RESET = 0x79
    LOCAL = 0x7A
    ALL_NOTES_OFF = 0x7B
    OMNI_OFF = 0x7C
    OMNI_ON = 0x7D
    MONO = 0x7E
    POLY = 0x7F


_SEMITONE_NAMES = (
    ("C",),
    ("Cs", "Db"),
    ("D",),
    ("Ds", "Eb"),
    ("E",),
    ("F",),
    ("Fs", "Gb"),
    ("G",),
    ("Gs", "Ab"),
    ("A",),
    ("As", "Bb"),
    ("B",),
)


def _note_members() -> list[tuple[str, int]]:
    members = []
    for octave in range(10):
        for semitone, names in enumerate(_SEMITONE_NAMES):
            value = 12 * (octave + 1) + semitone
            if value > 127:
                return members
            members.extend((f"{name}{octave}", value) for name in names)
    return members


Note = IntEnum("Note", _note_members(), module=__name__)
Note.__doc__ = "MIDI note numbers from C0 (12) to G9 (127); flats alias sharps."


class Message:
    """A MIDI 1.0 message held as its raw bytes."""

    SIZE: ClassVar[int] = 3

    data: bytes

    @classmethod
    def from_raw(cls, raw: int):
        """Build a message from 24-bit little-endian raw data (status in the LSB)."""
        msg = cls.__new__(cls)
        msg.data = bytes((raw >> (8 * i)) & 0xFF for i in range(cls.SIZE))
        return msg

    @property
    def raw(self) -> int:
        """The message as 24-bit little-endian raw data."""
        return int.from_bytes(self.data, "little")

    @property
    def status(self) -> int:
        """The status byte."""
        return self.data[0]

    def __bytes__(self) -> bytes:
        return self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return type(self) is type(other) and self.data == other.data

    def __hash__(self) -> int:
        return hash((type(self), self.data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_raw(0x{self.raw:06X})"


class _ChannelMessage(Message):
    @staticmethod
    def _status_byte(status: Status, channel: int) -> int:
        return (channel & 0x0F) | status

    @property
    def channel(self) -> int:
        """The channel, 0 to 15."""
        return self.data[0] & 0x0F


class NoteOff(_ChannelMessage):
    """Note-off message."""

    SIZE = 3

    def __init__(self, channel: int, key: int, velocity: int) -> None:
        self.data = bytes(
            (self._status_byte(Status.NOTE_OFF, channel), key & 0xFF, velocity & 0xFF)
        )

    @property
    def key(self) -> int:
        return self.data[1]

    @property
    def velocity(self) -> int:
        return self.data[2]


class NoteOn(_ChannelMessage):
    """Note-on message."""

    SIZE = 3

    def __init__(self, channel: int, key: int, velocity: int) -> None:
        self.data = bytes(
            (self._status_byte(Status.NOTE_ON, channel), key & 0xFF, velocity & 0xFF)
        )

    @property
    def key(self) -> int:
        return self.data[1]

    @property
    def velocity(self) -> int:
        return self.data[2]


class PolyAftertouch(_ChannelMessage):
    """Polyphonic key pressure message."""

    SIZE = 3

    def __init__(self, channel: int, key: int, pressure: int) -> None:
        self.data = bytes(
            (
                self._status_byte(Status.POLY_AFTERTOUCH, channel),
                key & 0xFF,
                pressure & 0xFF,
            )
        )

    @property
    def key(self) -> int:
        return self.data[1]

    @property
    def pressure(self) -> int:
        return self.data[2]


class ControlChange(_ChannelMessage):
    """Control change message."""

    SIZE = 3

    def __init__(self, channel: int, controller: int, value: int) -> None:
        self.data = bytes(
            (
                self._status_byte(Status.CONTROL_CHANGE, channel),
                int(controller) & 0xFF,
                value & 0xFF,
            )
        )

    @property
    def controller(self) -> Controller | int:
        """The controller; a plain int when it is not a known controller number."""
        try:
            return Controller(self.data[1])
        except ValueError:
            return self.data[1]

    @property
    def value(self) -> int:
        return self.data[2]


class ProgramChange(_ChannelMessage):
    """Program change message."""

    SIZE = 2

    def __init__(self, channel: int, preset: int) -> None:
        self.data = bytes(
            (self._status_byte(Status.PROGRAM_CHANGE, channel), preset & 0xFF)
        )

    @property
    def preset(self) -> int:
        return self.data[1]


class ChannelAftertouch(_ChannelMessage):
    """Channel pressure message."""

    SIZE = 2

    def __init__(self, channel: int, pressure: int) -> None:
        self.data = bytes(
            (self._status_byte(Status.CHANNEL_AFTERTOUCH, channel), pressure & 0xFF)
        )

    @property
    def pressure(self) -> int:
        return self.data[1]


class PitchBend(_ChannelMessage):
    """Pitch bend message with a 14-bit value."""

    SIZE = 3

    def __init__(self, channel: int, value: int) -> None:
        value &= 0xFFFF
        self.data = bytes(
            (
                self._status_byte(Status.PITCH_BEND, channel),
                value & 0x7F,
                (value >> 7) & 0xFF,
            )
        )

    @classmethod
    def from_lsb_msb(cls, channel: int, lsb: int, msb: int) -> PitchBend:
        """Build a pitch bend from its two data bytes."""
        msg = cls.__new__(cls)
        msg.data = bytes(
            (cls._status_byte(Status.PITCH_BEND, channel), lsb & 0xFF, msb & 0xFF)
        )
        return msg

    @property
    def value(self) -> int:
        return (self.data[1] | (self.data[2] << 7)) & 0xFFFF


class SongPosition(Message):
    """Song position pointer message."""

    SIZE = 3

    def __init__(self, position: int) -> None:
        position &= 0xFFFF
        self.data = bytes(
            (Status.SONG_POSITION, position & 0x7F, (position >> 7) & 0xFF)
        )

    @classmethod
    def from_lsb_msb(cls, lsb: int, msb: int) -> SongPosition:
        """Build a song position from its two data bytes."""
        msg = cls.__new__(cls)
        msg.data = bytes((Status.SONG_POSITION, lsb & 0xFF, msb & 0xFF))
        return msg

    @property
    def position(self) -> int:
        return (self.data[1] | (self.data[2] << 7)) & 0xFFFF


class SongSelect(Message):
    """Song select message."""

    SIZE = 2

    def __init__(self, song_number: int) -> None:
        self.data = bytes((Status.SONG_SELECT, song_number & 0xFF))

    @property
    def song_number(self) -> int:
        return self.data[1]


class _SystemMessage(Message):
    SIZE = 1
    STATUS: ClassVar[Status]

    def __init__(self) -> None:
        self.data = bytes((self.STATUS,))


class TuneRequest(_SystemMessage):
    """Tune request message."""

    STATUS = Status.TUNE_REQUEST


class TimingTick(_SystemMessage):
    """Timing clock message."""

    STATUS = Status.TIMING_TICK


class Start(_SystemMessage):
    """Start message."""

    STATUS = Status.START


class Continue(_SystemMessage):
    """Continue message."""

    STATUS = Status.CONTINUE


class Stop(_SystemMessage):
    """Stop message."""

    STATUS = Status.STOP


class ActiveSensing(_SystemMessage):
    """Active sensing message."""

    STATUS = Status.ACTIVE_SENSING


class Reset(_SystemMessage):
    """System reset message."""

    STATUS = Status.RESET


_NAME_STEPS = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
_NOTE_NAMES = tuple(f"{_NAME_STEPS[k % 12]}{k // 12 - 1}" for k in range(128))


def note_name(key: int) -> str:
    """Name of a MIDI key such as "C4"; "--" for keys outside 0..127."""
    return _NOTE_NAMES[key] if 0 <= key < 128 else "--"


_BASE_NOTES = {
    "A": Note.A0,
    "B": Note.B0,
    "C": Note.C0,
    "D": Note.D0,
    "E": Note.E0,
    "F": Note.F0,
    "G": Note.G0,
}


def note_number(note: str) -> int:
    """MIDI note number for a key such as "C5", "F#3" or "Bb2".

    The letter may be either case, followed by an optional '#' or 'b' and a
    single octave digit. Raises ValueError when the key cannot be parsed.
    """
    if not note:
        raise ValueError("empty note name")
    base = _BASE_NOTES.get(note[0].upper())
    if base is None:
        raise ValueError(f"invalid note letter in {note!r}")
    n = int(base)
    rest = note[1:]
    if rest[:1] == "#":
        n += 1
        rest = rest[1:]
    elif rest[:1] == "b":
        n -= 1
        rest = rest[1:]
    if len(rest) != 1 or rest not in "0123456789":
        raise ValueError(f"invalid octave in note name {note!r}")
    return n + int(rest) * 12